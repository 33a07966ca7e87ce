"""Pipeline orchestration engine.

This package provides the main entry point for running the reconciliation
pipeline, including configuration and result types.
"""

from camera_support.engine.config import (
    ConfigError,
    OutputFormat,
    PipelineConfig,
    PipelineResult,
    ReportConfig,
    SourceConfig,
)
from camera_support.engine.runner import PIPELINE_ORDER, build_steps, run_pipeline

__all__ = [
    "ConfigError",
    "OutputFormat",
    "PipelineConfig",
    "PipelineResult",
    "ReportConfig",
    "SourceConfig",
    "PIPELINE_ORDER",
    "build_steps",
    "run_pipeline",
]
