"""Tab-separated report renderer."""

from camera_support.report.options import COLUMN_HEADERS, ReportConfig
from camera_support.report.rows import Row


def render_tsv(rows: list[Row], config: ReportConfig) -> str:
    """Render rows as tab-separated text.

    One header line of column labels, then one line per row. No escaping,
    segmentation or header statistics.
    """
    lines = ["\t".join(COLUMN_HEADERS[f] for f in config.fields)]
    lines.extend("\t".join(row.cells) for row in rows)
    return "\n".join(lines) + "\n"
