"""Markdown report renderer."""

from itertools import groupby

from camera_support.normalize import key_maker
from camera_support.report.options import COLUMN_HEADERS, ReportConfig
from camera_support.report.rows import Row
from camera_support.report.stats import Stats, percent


def _header_cells(rows: list[Row], config: ReportConfig) -> list[str]:
    """Build header labels, with sub-totals over ``rows`` in table-stats mode."""
    if not config.stats_table:
        return [COLUMN_HEADERS[f] for f in config.fields]

    count = len(rows)
    wb = sum(1 for r in rows if r.record.wb_presets)
    noise = sum(1 for r in rows if r.record.noise_profiles)
    plain, with_percent = config.th_format

    cells: list[str] = []
    for f in config.fields:
        label = COLUMN_HEADERS[f]
        if f == "model":
            cells.append(plain.format(label=label, count=count, percent=0))
        elif f == "wbpresets":
            cells.append(with_percent.format(label=label, count=wb, percent=percent(wb, count)))
        elif f == "noiseprofiles":
            cells.append(
                with_percent.format(label=label, count=noise, percent=percent(noise, count))
            )
        else:
            cells.append(label)
    return cells


def _table_row(cells: list[str] | tuple[str, ...], widths: list[int]) -> str:
    return "".join(f"| {cell.ljust(width)} " for cell, width in zip(cells, widths)) + "|\n"


def _segments(rows: list[Row]) -> list[tuple[str, list[Row]]]:
    """Group consecutive rows by maker, returning (display maker, rows) pairs."""
    segments = []
    for _, group in groupby(rows, key=lambda r: key_maker(r.key)):
        segment_rows = list(group)
        segments.append((segment_rows[0].record.maker, segment_rows))
    return segments


def render_markdown(rows: list[Row], stats: Stats, config: ReportConfig) -> str:
    """Render rows as a Markdown table.

    Parameters
    ----------
    rows : list[Row]
        Rows from prepare_rows, in key order.
    stats : Stats
        Registry-wide statistics, used by the text summary.
    config : ReportConfig
        Rendering options.

    Returns
    -------
    str
        Markdown text. With ``segments`` set, each maker gets a heading at
        that level followed by its own header and separator; with
        ``stats_table`` set, sub-totals are computed per segment (or over
        the whole table when unsegmented).
    """
    if config.segments:
        blocks = [
            (maker, seg_rows, _header_cells(seg_rows, config))
            for maker, seg_rows in _segments(rows)
        ]
    else:
        blocks = [("", rows, _header_cells(rows, config))]

    widths = [0] * len(config.fields)
    for _, _, header in blocks:
        for i, cell in enumerate(header):
            widths[i] = max(widths[i], len(cell))
    for row in rows:
        for i, cell in enumerate(row.cells):
            widths[i] = max(widths[i], len(cell))

    separator = _table_row(["-" * w for w in widths], widths)

    parts: list[str] = []
    if config.stats_text:
        parts.append(
            f"In total **{stats.supported}** cameras are supported, of which "
            f"**{stats.wb_presets} ({stats.wb_presets_percent}%)** have white balance presets and "
            f"**{stats.noise_profiles} ({stats.noise_profiles_percent}%)** have noise profiles.\n\n"
        )

    heading = "#" * config.segments
    for maker, block_rows, header in blocks:
        if config.segments:
            parts.append(f"\n{heading} {maker}\n\n")
        parts.append(_table_row(header, widths))
        parts.append(separator)
        parts.extend(_table_row(row.cells, widths) for row in block_rows)

    return "".join(parts)
