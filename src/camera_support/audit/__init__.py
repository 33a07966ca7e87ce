"""Audit logging subsystem for camera_support.

Main Components
---------------
- AuditLogger: JSONL event logger
- generate_run_id: run identifier factory
"""

from camera_support.audit.helpers import generate_run_id, get_package_version
from camera_support.audit.logger import AuditLogger
from camera_support.audit.models import EVENT_LEVELS, LogEvent

__all__ = [
    "AuditLogger",
    "EVENT_LEVELS",
    "LogEvent",
    "generate_run_id",
    "get_package_version",
]
