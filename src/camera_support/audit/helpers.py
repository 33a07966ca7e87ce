"""Run identifiers and version lookup for the audit log."""

import importlib.metadata
import secrets

from camera_support.utils import get_iso_timestamp

__all__ = [
    "generate_run_id",
    "get_package_version",
]


def generate_run_id() -> str:
    """Build a run identifier: UTC start time, ``__``, eight random hex digits."""
    return f"{get_iso_timestamp()}__{secrets.token_hex(4)}"


def get_package_version() -> str:
    """Return the installed camera-support version, or ``"unknown"``."""
    try:
        return importlib.metadata.version("camera-support")
    except importlib.metadata.PackageNotFoundError:
        return "unknown"
