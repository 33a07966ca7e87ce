"""Tests for the pipeline runner."""

import json
from collections.abc import Callable
from pathlib import Path

import pytest

from camera_support.audit import AuditLogger
from camera_support.engine import (
    PIPELINE_ORDER,
    OutputFormat,
    PipelineConfig,
    ReportConfig,
    SourceConfig,
    build_steps,
    run_pipeline,
)
from camera_support.models import Decoder
from camera_support.normalize import camera_key

ACME_XML = b'<Cameras><Camera make="Acme" model="X100"/></Cameras>'


def _read_events(path: Path) -> list[dict]:
    with path.open() as f:
        return [json.loads(line) for line in f if line.strip()]


@pytest.mark.unit
def test_build_steps_follow_pipeline_order() -> None:
    """Test steps are built in precedence order."""
    steps = build_steps(PipelineConfig())

    assert tuple(step.source for step in steps) == PIPELINE_ORDER
    assert PIPELINE_ORDER[0] == "rawspeed"
    assert PIPELINE_ORDER[-1] == "rawspeed_dng"


@pytest.mark.unit
def test_run_pipeline_with_payloads(make_payloads: Callable[..., dict[str, bytes]]) -> None:
    """Test in-memory payloads are reconciled and rendered."""
    result = run_pipeline(payloads=make_payloads(rawspeed=ACME_XML))

    assert result.success
    assert result.error_message is None
    assert result.registry[camera_key("Acme", "X100")].decoder is Decoder.RAWSPEED
    assert result.stats is not None
    assert result.stats.cameras == 1
    assert result.output is not None
    assert "| Acme  | X100  |" in result.output


@pytest.mark.unit
def test_run_pipeline_without_libraw_payload(
    make_payloads: Callable[..., dict[str, bytes]],
) -> None:
    """Test the secondary decoder step is optional."""
    libraw = (
        b"const model_map_t modelMap[] = {\n"
        b'{ .clean_make = "Acme", .clean_model = "X100" },\n'
        b"};\n"
    )

    without = run_pipeline(payloads=make_payloads(rawspeed=ACME_XML))
    with_libraw = run_pipeline(payloads=make_payloads(rawspeed=ACME_XML, libraw=libraw))

    key = camera_key("Acme", "X100")
    assert without.registry[key].decoder is Decoder.RAWSPEED
    assert with_libraw.registry[key].decoder is Decoder.LIBRAW


@pytest.mark.unit
def test_run_pipeline_missing_required_payload(
    make_payloads: Callable[..., dict[str, bytes]],
) -> None:
    """Test a missing required payload fails with a configuration error."""
    payloads = make_payloads()
    del payloads["wb_presets"]

    result = run_pipeline(payloads=payloads)

    assert not result.success
    assert result.error_message == "ConfigError: No payload provided for source 'wb_presets'"


@pytest.mark.unit
def test_run_pipeline_empty_required_location() -> None:
    """Test an empty location for a required source fails the run."""
    config = PipelineConfig(sources=SourceConfig(rawspeed=""))

    result = run_pipeline(config)

    assert not result.success
    assert "No location configured for source 'rawspeed'" in result.error_message


@pytest.mark.unit
def test_run_pipeline_overlay_failure_keeps_partial_registry(
    make_payloads: Callable[..., dict[str, bytes]],
) -> None:
    """Test an overlay row for an unknown camera stops the run."""
    result = run_pipeline(payloads=make_payloads(rawspeed=ACME_XML, rawspeed_dng=b"Bolt,B1\n"))

    assert not result.success
    assert result.error_message == "MergeError: rawspeed-dng.csv: Bolt B1 not found in cameras"
    assert camera_key("Acme", "X100") in result.registry
    assert result.stats is None
    assert result.output is None


@pytest.mark.unit
def test_run_pipeline_extract_failure(make_payloads: Callable[..., dict[str, bytes]]) -> None:
    """Test an unparsable payload stops the run at its step."""
    result = run_pipeline(payloads=make_payloads(noise_profiles=b"{"))

    assert not result.success
    assert result.error_message.startswith("ExtractError: Unable to unmarshal noiseprofiles.json")


@pytest.mark.unit
def test_run_pipeline_none_output(make_payloads: Callable[..., dict[str, bytes]]) -> None:
    """Test the none format skips rendering but keeps statistics."""
    config = PipelineConfig(report=ReportConfig(output_format=OutputFormat.NONE))

    result = run_pipeline(config, payloads=make_payloads(rawspeed=ACME_XML))

    assert result.success
    assert result.output is None
    assert result.stats is not None
    assert result.to_dict()["cameras"] == 1


@pytest.mark.unit
def test_run_pipeline_logs_stages(
    tmp_path: Path,
    make_payloads: Callable[..., dict[str, bytes]],
) -> None:
    """Test each step is logged with counters and the skipped step is marked."""
    log_path = tmp_path / "events.jsonl"
    with AuditLogger(run_id="test_run", log_path=log_path) as logger:
        run_pipeline(payloads=make_payloads(rawspeed=ACME_XML), logger=logger)

    events = _read_events(log_path)
    names = [e["event"] for e in events]

    assert names[0] == "run_started"
    assert names[-1] == "run_finished"
    assert events[-1]["data"]["status"] == "success"
    assert events[-1]["data"]["cameras"] == 1
    assert names.count("stage_started") == len(PIPELINE_ORDER)
    assert names.count("stage_finished") == len(PIPELINE_ORDER) - 1

    skipped = [e for e in events if e["event"] == "stage_skipped"]
    assert [e["stage"] for e in skipped] == ["libraw"]

    rawspeed = next(
        e for e in events if e["event"] == "stage_finished" and e["stage"] == "rawspeed"
    )
    assert rawspeed["data"]["counters"] == {
        "facts": 1,
        "cameras_created": 1,
        "cameras_total": 1,
    }


@pytest.mark.unit
def test_run_pipeline_logs_errors(
    tmp_path: Path,
    make_payloads: Callable[..., dict[str, bytes]],
) -> None:
    """Test a failing run logs an error event and a failed status."""
    log_path = tmp_path / "events.jsonl"
    with AuditLogger(run_id="test_run", log_path=log_path) as logger:
        run_pipeline(payloads=make_payloads(rawspeed=b"<Lenses/>"), logger=logger)

    events = _read_events(log_path)
    error = next(e for e in events if e["event"] == "error")

    assert error["level"] == "ERROR"
    assert error["stage"] == "rawspeed"
    assert error["source"] == "cameras.xml"
    assert error["data"]["exception_class"] == "ExtractError"
    assert events[-1]["event"] == "run_finished"
    assert events[-1]["data"]["status"] == "failed"
