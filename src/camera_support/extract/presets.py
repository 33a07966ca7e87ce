"""darktable ``wb_presets.json`` and ``noiseprofiles.json`` extractors.

Both files share the same outer shape; only the top-level key differs::

    {"wb_presets": [{"maker": "Canon", "models": [{"model": "EOS R5", ...}]}]}
"""

import json
from typing import Any

from camera_support.extract.base import ExtractError
from camera_support.models import CameraFact

WB_PRESETS_SOURCE = "wb_presets.json"
NOISE_PROFILES_SOURCE = "noiseprofiles.json"


def _extract_maker_models(payload: bytes, top_key: str, source: str) -> list[CameraFact]:
    """Flatten a maker → models listing into facts.

    Parameters
    ----------
    payload : bytes
        Raw JSON document.
    top_key : str
        Name of the top-level list.
    source : str
        Source name used in error messages.

    Returns
    -------
    list[CameraFact]
        One fact per (maker, model) pair.

    Raises
    ------
    ExtractError
        If the payload is not JSON or does not have the expected shape.
    """
    try:
        data: Any = json.loads(payload)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ExtractError(f"Unable to unmarshal {source}: {e}", source=source) from e

    if not isinstance(data, dict) or not isinstance(data.get(top_key), list):
        raise ExtractError(
            f"Unable to unmarshal {source}: missing '{top_key}' list", source=source
        )

    facts: list[CameraFact] = []
    for index, entry in enumerate(data[top_key]):
        if not isinstance(entry, dict) or not isinstance(entry.get("models", []), list):
            raise ExtractError(
                f"Unable to unmarshal {source}: malformed maker entry #{index}", source=source
            )
        maker = str(entry.get("maker") or "")
        for model_entry in entry.get("models", []):
            if not isinstance(model_entry, dict):
                raise ExtractError(
                    f"Unable to unmarshal {source}: malformed model entry for {maker!r}",
                    source=source,
                )
            model = str(model_entry.get("model") or "")
            facts.append(CameraFact(maker=maker, model=model))
    return facts


def extract_wb_presets(payload: bytes) -> list[CameraFact]:
    """Extract facts from a ``wb_presets.json`` payload."""
    return _extract_maker_models(payload, "wb_presets", WB_PRESETS_SOURCE)


def extract_noise_profiles(payload: bytes) -> list[CameraFact]:
    """Extract facts from a ``noiseprofiles.json`` payload."""
    return _extract_maker_models(payload, "noiseprofiles", NOISE_PROFILES_SOURCE)
