"""Source extractors.

Each extractor turns one raw payload into a list of CameraFact objects.
Extractors never touch the registry; see camera_support.merge.
"""

from camera_support.extract.base import ExtractError, ExtractorFn
from camera_support.extract.ingestion import read_source
from camera_support.extract.libraw import extract_libraw
from camera_support.extract.overlay import extract_overlay
from camera_support.extract.presets import extract_noise_profiles, extract_wb_presets
from camera_support.extract.rawspeed import extract_rawspeed

__all__ = [
    "ExtractError",
    "ExtractorFn",
    "read_source",
    "extract_rawspeed",
    "extract_libraw",
    "extract_wb_presets",
    "extract_noise_profiles",
    "extract_overlay",
]
