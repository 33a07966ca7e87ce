"""UTC timestamps for audit events and run identifiers."""

from datetime import UTC, datetime

__all__ = ["get_iso_timestamp"]


def get_iso_timestamp() -> str:
    """Return the current UTC time as ``YYYY-MM-DDTHH:MM:SS.ffffffZ``."""
    return datetime.now(UTC).isoformat(timespec="microseconds").replace("+00:00", "Z")
