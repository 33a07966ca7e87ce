"""Public API for building the camera support registry and report.

This module provides high-level convenience functions over the pipeline
runner, raising ReportError instead of returning a failed result.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from camera_support.engine import OutputFormat, PipelineConfig, ReportConfig, run_pipeline

if TYPE_CHECKING:
    from camera_support.engine.config import PipelineResult
    from camera_support.models import Registry

__all__ = [
    "ReportError",
    "build_registry",
    "build_report",
]


class ReportError(Exception):
    """Raised when the pipeline cannot complete."""


def _run(
    config: PipelineConfig | None,
    payloads: Mapping[str, bytes] | None,
) -> PipelineResult:
    result = run_pipeline(config, payloads=payloads)
    if not result.success:
        raise ReportError(f"Camera support run failed: {result.error_message}")
    return result


def build_registry(
    payloads: Mapping[str, bytes],
    *,
    include_unsupported: bool = False,
) -> Registry:
    """Reconcile in-memory source payloads into a registry.

    Parameters
    ----------
    payloads : Mapping[str, bytes]
        Payloads keyed by source name (``rawspeed``, ``libraw``,
        ``wb_presets``, ``noise_profiles``, ``rawspeed_dng``). ``libraw`` may
        be omitted.
    include_unsupported : bool, optional
        Keep ``cameras.xml`` entries with a non-empty support status.

    Returns
    -------
    Registry
        Camera key to record mapping.

    Raises
    ------
    ReportError
        If a payload cannot be parsed or the overlay names an unknown camera.

    Examples
    --------
        >>> from pathlib import Path
        >>> from camera_support import build_registry
        >>> registry = build_registry({
        ...     "rawspeed": Path("cameras.xml").read_bytes(),
        ...     "wb_presets": Path("wb_presets.json").read_bytes(),
        ...     "noise_profiles": Path("noiseprofiles.json").read_bytes(),
        ...     "rawspeed_dng": Path("rawspeed-dng.csv").read_bytes(),
        ... })
    """
    config = PipelineConfig(
        report=ReportConfig(output_format=OutputFormat.NONE),
        include_unsupported=include_unsupported,
    )
    return _run(config, payloads).registry


def build_report(
    config: PipelineConfig | None = None,
    *,
    payloads: Mapping[str, bytes] | None = None,
) -> str | None:
    """Run the pipeline and return the rendered report.

    Parameters
    ----------
    config : PipelineConfig | None, optional
        Pipeline configuration. If None, uses defaults (fetches upstream
        sources and renders Markdown).
    payloads : Mapping[str, bytes] | None, optional
        In-memory payloads; when given, nothing is fetched.

    Returns
    -------
    str | None
        Report text, or None when the output format is ``none``.

    Raises
    ------
    ReportError
        If the run fails.
    """
    return _run(config, payloads).output
