"""Per-source merge rules.

Each function folds one source's facts into the registry and returns it.
The rules are order dependent: a step may overwrite or defer to the decoder
left by the steps before it, so they must run in the order fixed by
camera_support.engine.runner.
"""

from collections.abc import Iterable
from enum import StrEnum

from camera_support.models import CameraFact, CameraRecord, Decoder, Registry
from camera_support.normalize import camera_key

__all__ = [
    "MergeError",
    "PresetDataset",
    "merge_rawspeed",
    "merge_libraw",
    "merge_presets",
    "merge_overlay",
]

DEBUG_OVERLAY = "rawspeed-dng: Decoder set"


class MergeError(RuntimeError):
    """Raised when a source contradicts the registry built so far."""


class PresetDataset(StrEnum):
    """Flat maker/model datasets that carry no decoder information."""

    WB_PRESETS = "wb_presets.json"
    NOISE_PROFILES = "noiseprofiles.json"

    def mark(self, record: CameraRecord) -> None:
        """Set the boolean this dataset contributes."""
        if self is PresetDataset.WB_PRESETS:
            record.wb_presets = True
        else:
            record.noise_profiles = True


def _get_or_create(registry: Registry, key: str) -> tuple[CameraRecord, bool]:
    record = registry.get(key)
    if record is not None:
        return record, False
    record = CameraRecord()
    registry[key] = record
    return record, True


def merge_rawspeed(
    registry: Registry,
    facts: Iterable[CameraFact],
    *,
    include_unsupported: bool = False,
    default_format: str | None = "default",
) -> Registry:
    """Fold ``cameras.xml`` facts into the registry.

    Parameters
    ----------
    registry : Registry
        Registry to update in place.
    facts : Iterable[CameraFact]
        Facts from extract_rawspeed.
    include_unsupported : bool, optional
        Keep entries with a non-empty support status (decoder stays unset).
    default_format : str | None, optional
        Tag recorded for entries without a mode; None records nothing.

    Returns
    -------
    Registry
        The same registry.
    """
    for fact in facts:
        supported = fact.supported or ""
        if supported and not include_unsupported:
            continue

        record, _ = _get_or_create(registry, camera_key(fact.maker, fact.model))
        record.set_identity(fact.maker, fact.model)
        for alias in fact.aliases:
            record.add_alias(alias)

        tag = fact.format or default_format
        if tag:
            record.add_format(tag)

        record.rs_supported = supported
        if not supported:
            record.decoder = Decoder.RAWSPEED

        for note in fact.debug:
            record.add_debug(note)

    return registry


def merge_libraw(registry: Registry, facts: Iterable[CameraFact]) -> Registry:
    """Fold ``imageio_libraw.c`` facts into the registry.

    LibRaw takes over the decoder of every camera it lists, including
    cameras RawSpeed already claimed.
    """
    for fact in facts:
        record, _ = _get_or_create(registry, camera_key(fact.maker, fact.model))
        record.set_identity(fact.maker, fact.model)
        for alias in fact.aliases:
            record.add_alias(alias)
        record.decoder = Decoder.LIBRAW
        for note in fact.debug:
            record.add_debug(note)

    return registry


def merge_presets(
    registry: Registry,
    facts: Iterable[CameraFact],
    *,
    dataset: PresetDataset,
) -> Registry:
    """Fold a preset dataset into the registry.

    A camera first seen here gets ``Decoder.UNKNOWN``. A known camera without
    a decoder keeps it unset and only gets a diagnostic. A camera with a real
    decoder keeps it.

    Parameters
    ----------
    registry : Registry
        Registry to update in place.
    facts : Iterable[CameraFact]
        Facts from extract_wb_presets or extract_noise_profiles.
    dataset : PresetDataset
        Which dataset the facts came from.

    Returns
    -------
    Registry
        The same registry.
    """
    for fact in facts:
        record, created = _get_or_create(registry, camera_key(fact.maker, fact.model))
        if created:
            record.decoder = Decoder.UNKNOWN
            record.add_debug(f"Source: {dataset}")
        elif record.decoder is Decoder.UNSET:
            record.add_debug(f"{dataset}: No decoder")

        record.set_identity(fact.maker, fact.model)
        dataset.mark(record)

    return registry


def merge_overlay(registry: Registry, facts: Iterable[CameraFact]) -> Registry:
    """Fold ``rawspeed-dng.csv`` rows into the registry.

    Raises
    ------
    MergeError
        If a row names a camera that no earlier source produced.
    """
    for fact in facts:
        record = registry.get(camera_key(fact.maker, fact.model))
        if record is None:
            raise MergeError(f"rawspeed-dng.csv: {fact.maker} {fact.model} not found in cameras")
        record.decoder = Decoder.RAWSPEED
        record.add_debug(DEBUG_OVERLAY)

    return registry
