"""``rawspeed-dng.csv`` overlay extractor.

Cameras RawSpeed decodes through its DNG path but that ``cameras.xml`` does
not list. Rows are ``maker,model`` with an optional ``Maker,Model`` header.
"""

import csv

from camera_support.extract.base import ExtractError, decode_payload
from camera_support.models import CameraFact

SOURCE_NAME = "rawspeed-dng.csv"

HEADER_ROW = ("Maker", "Model")


def extract_overlay(payload: bytes) -> list[CameraFact]:
    """Extract maker/model rows from a ``rawspeed-dng.csv`` payload.

    Parameters
    ----------
    payload : bytes
        Raw CSV text.

    Returns
    -------
    list[CameraFact]
        One fact per data row.

    Raises
    ------
    ExtractError
        If the CSV is malformed or a row has fewer than two columns.
    """
    facts: list[CameraFact] = []
    reader = csv.reader(decode_payload(payload).split("\n"), strict=True)
    try:
        for row in reader:
            if not row or all(not cell.strip() for cell in row):
                continue
            if len(row) < 2:
                raise ExtractError(
                    f"Cannot read {SOURCE_NAME}: line {reader.line_num} has {len(row)} column(s)",
                    source=SOURCE_NAME,
                )
            maker, model = row[0], row[1]
            if (maker, model) == HEADER_ROW:
                continue
            facts.append(CameraFact(maker=maker, model=model))
    except csv.Error as e:
        raise ExtractError(f"Cannot read {SOURCE_NAME}: {e}", source=SOURCE_NAME) from e
    return facts
