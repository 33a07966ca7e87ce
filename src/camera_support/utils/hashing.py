"""Payload digests recorded in the audit log."""

import hashlib

__all__ = [
    "format_sha256",
    "calculate_payload_sha256",
]


def format_sha256(hex_digest: str) -> str:
    """Prefix a hex digest with its algorithm name, ``sha256:<hex>``."""
    return f"sha256:{hex_digest}"


def calculate_payload_sha256(payload: bytes) -> str:
    """Digest a source payload exactly as it was read.

    Parameters
    ----------
    payload : bytes
        Raw bytes returned by read_source.

    Returns
    -------
    str
        ``sha256:`` followed by 64 lowercase hex digits.
    """
    return format_sha256(hashlib.sha256(payload).hexdigest())
