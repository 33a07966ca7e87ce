"""Registry merge rules, one per source."""

from camera_support.merge.rules import (
    MergeError,
    PresetDataset,
    merge_libraw,
    merge_overlay,
    merge_presets,
    merge_rawspeed,
)

__all__ = [
    "MergeError",
    "PresetDataset",
    "merge_rawspeed",
    "merge_libraw",
    "merge_presets",
    "merge_overlay",
]
