"""Camera support matrix for darktable.

Reconciles RawSpeed, LibRaw, white-balance preset and noise profile
datasets into one registry and renders it as a Markdown or TSV table.

This package provides:
- Data models (camera_support.models): registry records and facts
- Normalization (camera_support.normalize): camera keys
- Extraction (camera_support.extract): source payload parsers
- Merge (camera_support.merge): per-source precedence rules
- Report (camera_support.report): statistics and rendering
- Engine (camera_support.engine): configuration and pipeline orchestration
- Audit (camera_support.audit): JSONL event logging
- CLI (camera_support.cli): command-line interface
- Public API (camera_support.api): high-level convenience functions
"""

__version__ = "1.0.0"
__license__ = "GPL-3.0-or-later"

from camera_support.api import ReportError, build_registry, build_report
from camera_support.engine import PipelineConfig, ReportConfig, SourceConfig, run_pipeline
from camera_support.models import CameraRecord, Decoder

__all__ = [
    "__version__",
    "__license__",
    "CameraRecord",
    "Decoder",
    "PipelineConfig",
    "ReportConfig",
    "SourceConfig",
    "ReportError",
    "build_registry",
    "build_report",
    "run_pipeline",
]
