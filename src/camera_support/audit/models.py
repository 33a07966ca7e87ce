"""Audit log event envelope."""

import json
from dataclasses import asdict, dataclass, field
from typing import Any

__all__ = ["LogEvent", "EVENT_LEVELS"]

EVENT_LEVELS = ("DEBUG", "INFO", "WARN", "ERROR")


@dataclass(frozen=True)
class LogEvent:
    """One line of the JSONL audit log.

    Attributes
    ----------
    ts : str
        UTC timestamp, ISO8601 with microseconds and a ``Z`` suffix.
    run_id : str
        Identifier shared by every event of one run.
    level : str
        One of EVENT_LEVELS.
    event : str
        Event name, e.g. ``source_loaded``.
    data : dict[str, Any]
        Event payload.
    stage : str | None
        Pipeline step (a PIPELINE_ORDER name) or None outside any step.
    source : str | None
        Dataset location or name the event refers to.
    """

    ts: str
    run_id: str
    level: str
    event: str
    data: dict[str, Any] = field(default_factory=dict)
    stage: str | None = None
    source: str | None = None

    def to_json(self) -> str:
        """Serialize as a compact single-line JSON object."""
        return json.dumps(asdict(self), ensure_ascii=False, separators=(",", ":"))
