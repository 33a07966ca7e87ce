"""Output format dispatch."""

from __future__ import annotations

from typing import TYPE_CHECKING

from camera_support.models import Registry
from camera_support.report.markdown import render_markdown
from camera_support.report.options import OutputFormat
from camera_support.report.rows import prepare_rows
from camera_support.report.stats import Stats
from camera_support.report.tsv import render_tsv

if TYPE_CHECKING:
    from camera_support.engine.config import PipelineConfig


def render_report(registry: Registry, stats: Stats, config: PipelineConfig) -> str | None:
    """Render the filtered registry in the configured output format.

    Returns
    -------
    str | None
        Report text, or None for ``OutputFormat.NONE``.
    """
    report = config.report
    if report.output_format is OutputFormat.NONE:
        return None

    rows = prepare_rows(
        registry,
        report,
        include_unknown=config.include_unknown,
        include_unsupported=config.include_unsupported,
    )
    if report.output_format is OutputFormat.TSV:
        return render_tsv(rows, report)
    return render_markdown(rows, stats, report)
