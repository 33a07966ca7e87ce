"""Table row construction."""

from dataclasses import dataclass

from camera_support.models import CameraRecord, Registry
from camera_support.report.options import OutputFormat, ReportConfig
from camera_support.report.stats import include_record

_MD_ESCAPES = str.maketrans(
    {
        "\\": "\\\\",
        "*": "\\*",
        "_": "\\_",
        "{": "\\{",
        "}": "\\}",
        "[": "\\[",
        "]": "\\]",
        "<": "\\<",
        ">": "\\>",
        "(": "\\(",
        ")": "\\)",
        "#": "\\#",
    }
)


def escape_markdown(text: str) -> str:
    """Backslash-escape Markdown control characters."""
    return text.translate(_MD_ESCAPES)


@dataclass(frozen=True)
class Row:
    """One rendered camera.

    Attributes
    ----------
    key : str
        Camera key, used for ordering and maker grouping. Never emitted.
    record : CameraRecord
        Source record, used for header sub-totals. Never emitted.
    cells : tuple[str, ...]
        Display strings, one per configured field.
    """

    key: str
    record: CameraRecord
    cells: tuple[str, ...]


def _cell(record: CameraRecord, field_name: str, bools: tuple[str, str], escape: bool) -> str:
    if field_name == "maker":
        return record.maker
    if field_name == "model":
        return escape_markdown(record.model) if escape else record.model
    if field_name == "aliases":
        aliases = ", ".join(record.aliases)
        return escape_markdown(aliases) if escape else aliases
    if field_name == "formats":
        return ", ".join(record.formats)
    if field_name == "wbpresets":
        return bools[0] if record.wb_presets else bools[1]
    if field_name == "noiseprofiles":
        return bools[0] if record.noise_profiles else bools[1]
    if field_name == "rssupported":
        return record.rs_supported
    if field_name == "decoder":
        return str(record.decoder)
    if field_name == "debug":
        return ", ".join(record.debug)
    raise KeyError(field_name)


def prepare_rows(
    registry: Registry,
    config: ReportConfig,
    *,
    include_unknown: bool = False,
    include_unsupported: bool = False,
) -> list[Row]:
    """Filter, order and format the registry for rendering.

    Parameters
    ----------
    registry : Registry
        Final registry.
    config : ReportConfig
        Fields, boolean tokens and escaping.
    include_unknown : bool, optional
        Keep cameras with ``Decoder.UNKNOWN``.
    include_unsupported : bool, optional
        Keep cameras with ``Decoder.UNSET``.

    Returns
    -------
    list[Row]
        Rows sorted by camera key, filtered exactly as generate_stats
        filters.
    """
    escape = config.escape and config.output_format is OutputFormat.MARKDOWN

    rows: list[Row] = []
    for key in sorted(registry):
        record = registry[key]
        if not include_record(
            record,
            include_unknown=include_unknown,
            include_unsupported=include_unsupported,
        ):
            continue
        cells = tuple(_cell(record, f, config.bools, escape) for f in config.fields)
        rows.append(Row(key=key, record=record, cells=cells))
    return rows
