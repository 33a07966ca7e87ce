"""Statistics and report rendering."""

from camera_support.report.markdown import render_markdown
from camera_support.report.options import (
    COLUMN_HEADERS,
    ConfigError,
    OutputFormat,
    ReportConfig,
)
from camera_support.report.render import render_report
from camera_support.report.rows import Row, escape_markdown, prepare_rows
from camera_support.report.stats import (
    Stats,
    format_stats_summary,
    generate_stats,
    include_record,
    percent,
)
from camera_support.report.tsv import render_tsv

__all__ = [
    "COLUMN_HEADERS",
    "ConfigError",
    "OutputFormat",
    "ReportConfig",
    "Row",
    "Stats",
    "escape_markdown",
    "format_stats_summary",
    "generate_stats",
    "include_record",
    "percent",
    "prepare_rows",
    "render_markdown",
    "render_report",
    "render_tsv",
]
