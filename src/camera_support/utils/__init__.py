"""Digest and timestamp helpers shared by the audit log."""

from camera_support.utils.hashing import calculate_payload_sha256, format_sha256
from camera_support.utils.timestamps import get_iso_timestamp

__all__ = [
    "calculate_payload_sha256",
    "format_sha256",
    "get_iso_timestamp",
]
