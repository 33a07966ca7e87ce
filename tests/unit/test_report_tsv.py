"""Tests for the tab-separated renderer."""

from collections.abc import Callable

import pytest

from camera_support.models import CameraRecord, Decoder
from camera_support.normalize import camera_key
from camera_support.report import COLUMN_HEADERS, ReportConfig, prepare_rows, render_tsv
from camera_support.report.options import FIELD_PRESETS, resolve_fields


@pytest.mark.unit
def test_tsv_round_trip(make_record: Callable[..., CameraRecord]) -> None:
    """Test parsing the TSV back yields the rendered cell values."""
    records = [
        make_record("Canon", "EOS 5D", aliases=["5D"], formats=["default", "sRaw1"]),
        make_record("Nikon", "D70", decoder=Decoder.LIBRAW, wb_presets=True),
        make_record("Leaf", "Aptus 22", noise_profiles=True, debug=["x_y"]),
    ]
    registry = {camera_key(r.maker, r.model): r for r in records}
    config = ReportConfig(output_format="tsv", fields=resolve_fields("all-debug"))
    rows = prepare_rows(registry, config)

    lines = render_tsv(rows, config).splitlines()

    assert lines[0].split("\t") == [COLUMN_HEADERS[f] for f in config.fields]
    assert [tuple(line.split("\t")) for line in lines[1:]] == [row.cells for row in rows]


@pytest.mark.unit
def test_tsv_is_not_escaped_or_segmented(make_record: Callable[..., CameraRecord]) -> None:
    """Test TSV ignores Markdown-only options."""
    record = make_record("Acme", "X_100", wb_presets=True)
    config = ReportConfig(
        output_format="tsv",
        fields=["maker", "model", "wbpresets"],
        escape=True,
        segments=2,
        stats_table=True,
    )

    output = render_tsv(prepare_rows({camera_key("Acme", "X_100"): record}, config), config)

    assert output == "Maker\tModel\tWB Presets\nAcme\tX_100\tYes\n"


@pytest.mark.unit
def test_tsv_empty_registry() -> None:
    """Test an empty registry renders only the header line."""
    config = ReportConfig(output_format="tsv", fields=resolve_fields(FIELD_PRESETS["no-maker"]))

    assert render_tsv([], config) == "Model\tAliases\tWB Presets\tNoise Profile\tDecoder\n"
