"""Report options: columns, output formats and rendering configuration."""

from dataclasses import dataclass, field
from enum import StrEnum

COLUMN_HEADERS: dict[str, str] = {
    "maker": "Maker",
    "model": "Model",
    "aliases": "Aliases",
    "formats": "Formats",
    "wbpresets": "WB Presets",
    "noiseprofiles": "Noise Profile",
    "rssupported": "RawSpeed Support",
    "decoder": "Decoder",
    "debug": "Debug",
}

FIELD_PRESETS: dict[str, str] = {
    "all": "maker;model;aliases;wbpresets;noiseprofiles;decoder;rssupported;formats",
    "all-debug": "maker;model;aliases;wbpresets;noiseprofiles;decoder;rssupported;formats;debug",
    "no-maker": "model;aliases;wbpresets;noiseprofiles;decoder",
}

DEFAULT_FIELDS = ("maker", "model", "aliases", "wbpresets", "noiseprofiles", "decoder")
DEFAULT_BOOLS = ("Yes", "No")
DEFAULT_TH_FORMAT = ("{label} ({count})", "{label} ({count} / {percent}%)")

STATS_MODES = ("stdout", "table", "text")
MAX_SEGMENT_LEVEL = 6


class ConfigError(ValueError):
    """Raised for configuration values the pipeline cannot work with."""


class OutputFormat(StrEnum):
    """Rendered output format."""

    MARKDOWN = "md"
    TSV = "tsv"
    NONE = "none"


def parse_pair(value: str, what: str) -> tuple[str, str]:
    """Split a ``"first;second"`` option value.

    Raises
    ------
    ConfigError
        If the value does not contain exactly one semicolon.
    """
    if value.count(";") != 1:
        raise ConfigError(f"{what} must contain exactly one semicolon, got {value!r}")
    first, second = value.split(";")
    return first, second


def parse_stats_modes(value: str) -> set[str]:
    """Parse a ``;``-delimited list of statistics modes.

    Raises
    ------
    ConfigError
        If a mode is not one of ``stdout``, ``table`` or ``text``.
    """
    modes = set()
    for mode in value.lower().split(";"):
        if mode not in STATS_MODES:
            raise ConfigError(f"Invalid stats mode: {mode!r}")
        modes.add(mode)
    return modes


def resolve_fields(value: str) -> list[str]:
    """Expand a field preset or ``;``-delimited field list to field names.

    Names are lower-cased; unknown names are dropped.
    """
    expanded = FIELD_PRESETS.get(value.lower(), value)
    names = (part.strip().lower() for part in expanded.split(";"))
    return [name for name in names if name in COLUMN_HEADERS]


@dataclass
class ReportConfig:
    """Rendering options.

    Attributes
    ----------
    output_format : OutputFormat
        ``md``, ``tsv`` or ``none``. Strings are coerced.
    fields : list[str]
        Columns to render, in order. Unknown names are dropped.
    bools : tuple[str, str]
        Display tokens for true and false.
    escape : bool
        Escape Markdown characters in model and aliases.
    segments : int
        Heading level for per-maker segments, 0 for a single table.
    stats_table : bool
        Replace header labels with sub-totals.
    stats_text : bool
        Prepend a summary sentence.
    th_format : tuple[str, str]
        Header templates without and with a percentage. Placeholders are
        ``{label}``, ``{count}`` and ``{percent}``.
    """

    output_format: OutputFormat | str = OutputFormat.MARKDOWN
    fields: list[str] = field(default_factory=lambda: list(DEFAULT_FIELDS))
    bools: tuple[str, str] = DEFAULT_BOOLS
    escape: bool = False
    segments: int = 0
    stats_table: bool = False
    stats_text: bool = False
    th_format: tuple[str, str] = DEFAULT_TH_FORMAT

    def __post_init__(self) -> None:
        """Coerce and validate."""
        try:
            self.output_format = OutputFormat(self.output_format)
        except ValueError as e:
            raise ConfigError(
                f"output_format must be one of md, tsv, none, got {self.output_format!r}"
            ) from e

        self.fields = [f.lower() for f in self.fields if f.lower() in COLUMN_HEADERS]
        if not self.fields and self.output_format is not OutputFormat.NONE:
            raise ConfigError("fields must name at least one known column")

        if len(self.bools) != 2:
            raise ConfigError(f"bools must have exactly two values, got {self.bools!r}")
        self.bools = (self.bools[0], self.bools[1])

        if not 0 <= self.segments <= MAX_SEGMENT_LEVEL:
            raise ConfigError(
                f"segments must be in [0, {MAX_SEGMENT_LEVEL}], got {self.segments}"
            )

        if len(self.th_format) != 2:
            raise ConfigError(f"th_format must have exactly two templates, got {self.th_format!r}")
        self.th_format = (self.th_format[0], self.th_format[1])
        for template in self.th_format:
            try:
                template.format(label="Label", count=0, percent=0)
            except (AttributeError, KeyError, IndexError, TypeError, ValueError) as e:
                raise ConfigError(f"Malformed header template {template!r}: {e}") from e
