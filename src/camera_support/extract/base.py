"""Base types and utilities for source extractors."""

from collections.abc import Callable

from camera_support.models import CameraFact

ExtractorFn = Callable[[bytes], list[CameraFact]]


class ExtractError(Exception):
    """Raised when a source payload cannot be read or parsed."""

    def __init__(self, message: str, source: str | None = None) -> None:
        """Initialize extract error.

        Parameters
        ----------
        message : str
            Error message.
        source : str | None, optional
            Logical source name or location where the error occurred.
        """
        super().__init__(message)
        self.source = source


def detect_encoding(payload: bytes) -> str:
    """Detect encoding of payload bytes using deterministic strategy.

    Parameters
    ----------
    payload : bytes
        Complete source content as bytes.

    Returns
    -------
    str
        Detected encoding (utf-8-sig, utf-8 or latin-1).
    """
    if payload.startswith(b"\xef\xbb\xbf"):
        return "utf-8-sig"

    try:
        payload.decode("utf-8")
        return "utf-8"
    except UnicodeDecodeError:
        pass

    return "latin-1"


def decode_payload(payload: bytes) -> str:
    """Decode payload bytes to text with LF line endings."""
    text = payload.decode(detect_encoding(payload))
    text = text.replace("\r\n", "\n")
    return text.replace("\r", "\n")
