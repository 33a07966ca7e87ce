"""Pipeline configuration and result dataclasses."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import TYPE_CHECKING, Any

from camera_support.extract.ingestion import (
    LIBRAW_URL,
    NOISE_PROFILES_URL,
    RAWSPEED_DNG_URL,
    RAWSPEED_URL,
    WB_PRESETS_URL,
)
from camera_support.report.options import (
    COLUMN_HEADERS,
    FIELD_PRESETS,
    ConfigError,
    OutputFormat,
    ReportConfig,
    parse_pair,
    parse_stats_modes,
    resolve_fields,
)

if TYPE_CHECKING:
    from camera_support.models import Registry
    from camera_support.report.stats import Stats

__all__ = [
    "COLUMN_HEADERS",
    "FIELD_PRESETS",
    "ConfigError",
    "OutputFormat",
    "ReportConfig",
    "SourceConfig",
    "PipelineConfig",
    "PipelineResult",
    "parse_pair",
    "parse_stats_modes",
    "resolve_fields",
]


@dataclass
class SourceConfig:
    """Locations of the upstream datasets.

    Attributes
    ----------
    rawspeed : str
        ``cameras.xml`` URL or path.
    rawspeed_dng : str
        ``rawspeed-dng.csv`` URL or path.
    libraw : str
        ``imageio_libraw.c`` URL or path. Empty disables the LibRaw step.
    wb_presets : str
        ``wb_presets.json`` URL or path.
    noise_profiles : str
        ``noiseprofiles.json`` URL or path.
    """

    rawspeed: str = RAWSPEED_URL
    rawspeed_dng: str = RAWSPEED_DNG_URL
    libraw: str = LIBRAW_URL
    wb_presets: str = WB_PRESETS_URL
    noise_profiles: str = NOISE_PROFILES_URL


@dataclass
class PipelineConfig:
    """Configuration for one reconciliation and report run.

    Attributes
    ----------
    sources : SourceConfig
        Upstream dataset locations.
    report : ReportConfig
        Rendering options.
    include_unknown : bool
        Keep cameras only known from preset datasets.
    include_unsupported : bool
        Keep cameras without a decoder.
    default_format : str | None
        Format tag for ``cameras.xml`` entries without a mode, None to skip.
    """

    sources: SourceConfig = field(default_factory=SourceConfig)
    report: ReportConfig = field(default_factory=ReportConfig)
    include_unknown: bool = False
    include_unsupported: bool = False
    default_format: str | None = "default"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        data = asdict(self)
        data["report"]["output_format"] = str(self.report.output_format)
        return data


@dataclass
class PipelineResult:
    """Results from pipeline execution.

    Attributes
    ----------
    success : bool
        Whether every step completed.
    registry : Registry
        Registry as left by the last completed step.
    stats : Stats | None
        Aggregate statistics, None if the run failed before aggregation.
    output : str | None
        Rendered report, None for ``none`` output or on failure.
    error_message : str | None
        Error message if failed.
    """

    success: bool
    registry: Registry
    stats: Stats | None = None
    output: str | None = None
    error_message: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "success": self.success,
            "cameras": len(self.registry),
            "stats": self.stats.to_dict() if self.stats is not None else None,
            "error_message": self.error_message,
        }
