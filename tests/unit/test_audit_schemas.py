"""Tests for schema validation of audit events."""

import json
from collections.abc import Callable
from pathlib import Path

import jsonschema
import pytest

from camera_support.audit import AuditLogger
from camera_support.engine import PipelineConfig, SourceConfig, run_pipeline

_SCHEMAS_DIR = Path(__file__).parent.parent.parent / "schemas"


@pytest.fixture(scope="module")
def event_schema() -> dict:
    """Load log event JSON schema."""
    with (_SCHEMAS_DIR / "log_event.schema.json").open() as f:
        return json.load(f)


def _validate_log(path: Path, schema: dict) -> list[dict]:
    events = []
    with path.open() as f:
        for line in f:
            if line.strip():
                event = json.loads(line)
                jsonschema.validate(instance=event, schema=schema)
                events.append(event)
    return events


@pytest.mark.unit
def test_schema_is_valid(event_schema: dict) -> None:
    """Test the schema itself is well formed."""
    jsonschema.Draft202012Validator.check_schema(event_schema)


@pytest.mark.unit
def test_generated_events_validate(
    tmp_path: Path,
    fixture_paths: dict[str, Path],
    event_schema: dict,
) -> None:
    """Test events of a successful run validate against schema."""
    config = PipelineConfig(
        sources=SourceConfig(**{name: str(path) for name, path in fixture_paths.items()})
    )
    log_path = tmp_path / "events.jsonl"

    with AuditLogger(run_id="2026-01-01T00:00:00Z__0123abcd", log_path=log_path) as logger:
        result = run_pipeline(config, logger=logger)

    assert result.success
    events = _validate_log(log_path, event_schema)
    assert sum(1 for e in events if e["event"] == "source_loaded") == 5


@pytest.mark.unit
def test_failed_run_events_validate(
    tmp_path: Path,
    make_payloads: Callable[..., dict[str, bytes]],
    event_schema: dict,
) -> None:
    """Test events of a failed run, including the error, validate."""
    log_path = tmp_path / "events.jsonl"

    with AuditLogger(run_id="2026-01-01T00:00:00Z__0123abcd", log_path=log_path) as logger:
        result = run_pipeline(payloads=make_payloads(rawspeed_dng=b"Acme,X100\n"), logger=logger)

    assert not result.success
    events = _validate_log(log_path, event_schema)
    assert any(e["event"] == "error" for e in events)


@pytest.mark.unit
def test_invalid_data_rejected_by_schema(event_schema: dict) -> None:
    """Test schema rejects invalid level, unknown events and missing fields."""
    valid = {
        "ts": "2026-01-01T00:00:00.000000Z",
        "run_id": "2026-01-01T00:00:00Z__0123abcd",
        "level": "INFO",
        "event": "stage_started",
        "data": {},
        "stage": "rawspeed",
        "source": None,
    }
    jsonschema.validate(instance=valid, schema=event_schema)

    for bad in (
        {**valid, "level": "TRACE"},
        {**valid, "event": "record_flagged"},
        {**valid, "stage": "stage1_normalize"},
        {key: value for key, value in valid.items() if key != "data"},
        {**valid, "event": "error", "level": "INFO", "data": {"message": "x"}},
        {**valid, "event": "source_loaded", "data": {"sha256": "abc", "bytes": 1}},
    ):
        with pytest.raises(jsonschema.ValidationError):
            jsonschema.validate(instance=bad, schema=event_schema)
