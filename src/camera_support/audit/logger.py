"""JSONL audit trail for pipeline runs.

Every event is one JSON object on its own line, flushed as soon as it is
written.
"""

from pathlib import Path
from typing import Any

from camera_support.audit.helpers import get_package_version
from camera_support.audit.models import EVENT_LEVELS, LogEvent
from camera_support.utils import get_iso_timestamp

__all__ = ["AuditLogger"]


class AuditLogger:
    """Append-only event writer bound to one run.

    Use as a context manager so the log file is closed when the run ends.

    Attributes
    ----------
    run_id : str
        Identifier stamped on every event.
    log_path : Path
        JSONL file events are appended to.
    current_stage : str | None
        Pipeline step inherited by events that do not name one.
    """

    def __init__(self, run_id: str, log_path: Path) -> None:
        """Open ``log_path`` for appending, creating parent directories."""
        self.run_id = run_id
        self.log_path = log_path
        self.current_stage: str | None = None

        log_path.parent.mkdir(parents=True, exist_ok=True)
        self._handle = log_path.open("a", encoding="utf-8")

    def __enter__(self) -> "AuditLogger":
        """Enter context manager."""
        return self

    def __exit__(self, *exc_info: Any) -> None:
        """Exit context manager and close the log file."""
        self.close()

    def close(self) -> None:
        """Close the log file. Safe to call more than once."""
        if self._handle.closed:
            return
        self._handle.flush()
        self._handle.close()

    def set_stage(self, stage: str | None) -> None:
        """Change the step inherited by subsequent events."""
        self.current_stage = stage

    def event(
        self,
        event_type: str,
        data: dict[str, Any] | None = None,
        level: str = "INFO",
        stage: str | None = None,
        source: str | None = None,
    ) -> None:
        """Append one event.

        Parameters
        ----------
        event_type : str
            Event name.
        data : dict[str, Any] | None, optional
            Payload, empty when omitted.
        level : str, optional
            One of ``DEBUG``, ``INFO``, ``WARN``, ``ERROR``.
        stage : str | None, optional
            Pipeline step; defaults to current_stage.
        source : str | None, optional
            Dataset location or name the event is about.

        Raises
        ------
        ValueError
            If ``level`` is not a known level.
        """
        if level not in EVENT_LEVELS:
            raise ValueError(f"Unknown log level: {level!r}")

        self._emit(
            LogEvent(
                ts=get_iso_timestamp(),
                run_id=self.run_id,
                level=level,
                event=event_type,
                data=data or {},
                stage=stage if stage is not None else self.current_stage,
                source=source,
            )
        )

    def _emit(self, log_event: LogEvent) -> None:
        self._handle.write(log_event.to_json() + "\n")
        self._handle.flush()

    # Run lifecycle

    def run_started(self, command: list[str], parameters: dict[str, Any]) -> None:
        """Record the command line, package version and effective configuration."""
        self.event(
            "run_started",
            data={
                "command": list(command),
                "version": get_package_version(),
                "parameters": parameters,
            },
        )

    def run_finished(
        self,
        status: str,
        duration_seconds: float,
        cameras: int | None = None,
    ) -> None:
        """Record the outcome (``success`` or ``failed``) and registry size."""
        data: dict[str, Any] = {"status": status, "duration_seconds": duration_seconds}
        if cameras is not None:
            data["cameras"] = cameras
        self.event("run_finished", data=data)

    # Pipeline steps

    def stage_started(self, stage: str) -> None:
        """Enter a pipeline step; later events inherit it."""
        self.set_stage(stage)
        self.event("stage_started")

    def stage_finished(
        self,
        stage: str,
        duration_seconds: float,
        counters: dict[str, int] | None = None,
    ) -> None:
        """Record a completed step with its fact and camera counters."""
        data: dict[str, Any] = {"duration_seconds": duration_seconds}
        if counters:
            data["counters"] = dict(counters)
        self.event("stage_finished", data=data, stage=stage)

    def source_loaded(
        self,
        location: str,
        sha256: str,
        bytes_read: int,
        stage: str | None = None,
    ) -> None:
        """Record which payload a step consumed, by location and digest."""
        self.event(
            "source_loaded",
            data={"sha256": sha256, "bytes": bytes_read},
            stage=stage,
            source=location,
        )

    # Failures

    def error(
        self,
        exception_class: str,
        message: str,
        stage: str | None = None,
        source: str | None = None,
        traceback: str | None = None,
    ) -> None:
        """Record the exception that stopped the run.

        Parameters
        ----------
        exception_class : str
            Exception class name, e.g. ``MergeError``.
        message : str
            Exception message.
        stage : str | None, optional
            Failing step; defaults to current_stage.
        source : str | None, optional
            Dataset the failure is attributed to.
        traceback : str | None, optional
            Formatted traceback.
        """
        data: dict[str, Any] = {"exception_class": exception_class, "message": message}
        if traceback is not None:
            data["traceback"] = traceback
        self.event("error", data=data, level="ERROR", stage=stage, source=source)
