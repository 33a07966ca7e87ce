"""darktable ``imageio_libraw.c`` extractor.

The LibRaw camera list is a C array initializer. Only the lines between the
opening marker and the closing ``};`` are considered, and only three field
assignments are recognized::

    const model_map_t modelMap[] = {
      {
        .exif_make = "Canon",
        .exif_model = "Canon EOS R3",
        .clean_make = "Canon",
        .clean_model = "EOS R3",
        .clean_alias = "EOS R3",
      },
    };
"""

import re
from enum import Enum

from camera_support.extract.base import ExtractError, decode_payload
from camera_support.models import CameraFact

SOURCE_NAME = "imageio_libraw.c"

BLOCK_START = "const model_map_t modelMap[] = {"
BLOCK_END = "};"
RECORD_END = "},"

FIELD_PATTERNS: dict[str, re.Pattern[str]] = {
    "maker": re.compile(r"\.clean_make\s*=\s*\"([^\"]*)\""),
    "model": re.compile(r"\.clean_model\s*=\s*\"([^\"]*)\""),
    "alias": re.compile(r"\.clean_alias\s*=\s*\"([^\"]*)\""),
}


class _ScanState(Enum):
    IDLE = "idle"
    INSIDE = "inside"
    DONE = "done"


def extract_libraw(payload: bytes) -> list[CameraFact]:
    """Extract camera facts from an ``imageio_libraw.c`` payload.

    Parameters
    ----------
    payload : bytes
        Raw C source text.

    Returns
    -------
    list[CameraFact]
        One fact per committed record, in source order.

    Raises
    ------
    ExtractError
        If the ``modelMap`` block is never found.
    """
    facts: list[CameraFact] = []
    state = _ScanState.IDLE
    current: dict[str, str] = {}

    for line in decode_payload(payload).split("\n"):
        if state is _ScanState.IDLE:
            if BLOCK_START in line:
                state = _ScanState.INSIDE
            continue

        if BLOCK_END in line:
            state = _ScanState.DONE
            break

        for name, pattern in FIELD_PATTERNS.items():
            match = pattern.search(line)
            if match:
                current[name] = match.group(1)

        if RECORD_END in line:
            facts.append(_commit(current))
            current = {}

    if state is _ScanState.IDLE:
        raise ExtractError(f"No LibRaw cameras found in {SOURCE_NAME}", source=SOURCE_NAME)

    return facts


def _commit(fields: dict[str, str]) -> CameraFact:
    """Build a fact from the fields accumulated for one record."""
    model = fields.get("model", "")
    alias = fields.get("alias", "")
    aliases = (alias,) if alias and alias != model else ()
    return CameraFact(maker=fields.get("maker", ""), model=model, aliases=aliases)
