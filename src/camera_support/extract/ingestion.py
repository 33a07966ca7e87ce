"""Retrieve raw source payloads from URLs or local paths."""

from pathlib import Path

import requests

from camera_support.extract.base import ExtractError

REQUEST_TIMEOUT = 30

RAWSPEED_URL = "https://raw.githubusercontent.com/darktable-org/rawspeed/develop/data/cameras.xml"
RAWSPEED_DNG_URL = (
    "https://raw.githubusercontent.com/Donatzsky/darktable-camera-support/main/rawspeed-dng.csv"
)
LIBRAW_URL = (
    "https://raw.githubusercontent.com/darktable-org/darktable/master/src/imageio/imageio_libraw.c"
)
WB_PRESETS_URL = (
    "https://raw.githubusercontent.com/darktable-org/darktable/master/data/wb_presets.json"
)
NOISE_PROFILES_URL = (
    "https://raw.githubusercontent.com/darktable-org/darktable/master/data/noiseprofiles.json"
)


def is_remote(location: str) -> bool:
    """Return True if ``location`` is fetched over HTTP(S)."""
    return location.startswith(("https://", "http://"))


def read_source(location: str) -> bytes:
    """Read one source payload.

    Parameters
    ----------
    location : str
        ``http(s)://`` URL or local filesystem path.

    Returns
    -------
    bytes
        Raw payload.

    Raises
    ------
    ExtractError
        If the request fails, returns a non-2xx status, or the file
        cannot be read.
    """
    if is_remote(location):
        try:
            response = requests.get(location, timeout=REQUEST_TIMEOUT)
            response.raise_for_status()
        except requests.RequestException as e:
            raise ExtractError(f"Failed to fetch {location}: {e}", source=location) from e
        return response.content

    path = Path(location)
    try:
        return path.read_bytes()
    except OSError as e:
        raise ExtractError(f"Failed to read {location}: {e}", source=location) from e
