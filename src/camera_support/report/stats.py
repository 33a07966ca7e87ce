"""Aggregate statistics over the merged registry."""

from dataclasses import asdict, dataclass
from typing import Any

from camera_support.models import CameraRecord, Decoder, Registry

__all__ = [
    "Stats",
    "percent",
    "include_record",
    "generate_stats",
    "format_stats_summary",
]


def percent(part: int, total: int) -> int:
    """Integer percentage rounded half away from zero.

    Parameters
    ----------
    part : int
        Sub-count.
    total : int
        Total count.

    Returns
    -------
    int
        ``round(100 * part / total)`` with halves rounded up, or 0 when
        ``total`` is 0.
    """
    if total == 0:
        return 0
    # Integer arithmetic avoids float error at exact halves
    sign = -1 if (part < 0) != (total < 0) else 1
    return sign * ((200 * abs(part) + abs(total)) // (2 * abs(total)))


def include_record(
    record: CameraRecord,
    *,
    include_unknown: bool,
    include_unsupported: bool,
) -> bool:
    """Return True if the record survives the unknown/unsupported filters."""
    if record.decoder is Decoder.UNSET:
        return include_unsupported
    if record.decoder is Decoder.UNKNOWN:
        return include_unknown
    return True


@dataclass
class Stats:
    """Counts over the filtered registry.

    Attributes
    ----------
    cameras : int
        Cameras counted.
    aliases : int
        Sum of alias counts.
    rawspeed : int
        Cameras decoded by RawSpeed.
    libraw : int
        Cameras decoded by LibRaw.
    unknown : int
        Cameras with unknown support (only with include_unknown).
    unsupported : int
        Cameras without a decoder (only with include_unsupported).
    wb_presets : int
        Cameras with white-balance presets.
    noise_profiles : int
        Cameras with noise profiles.
    """

    cameras: int = 0
    aliases: int = 0
    rawspeed: int = 0
    libraw: int = 0
    unknown: int = 0
    unsupported: int = 0
    wb_presets: int = 0
    noise_profiles: int = 0

    @property
    def supported(self) -> int:
        """Cameras with a primary or secondary decoder."""
        return self.rawspeed + self.libraw

    @property
    def rawspeed_percent(self) -> int:
        """Percentage of counted cameras decoded by RawSpeed."""
        return percent(self.rawspeed, self.cameras)

    @property
    def libraw_percent(self) -> int:
        """Percentage of counted cameras decoded by LibRaw."""
        return percent(self.libraw, self.cameras)

    @property
    def supported_percent(self) -> int:
        """Percentage with either decoder."""
        return percent(self.supported, self.cameras)

    @property
    def unknown_percent(self) -> int:
        """Percentage only known from preset datasets."""
        return percent(self.unknown, self.cameras)

    @property
    def unsupported_percent(self) -> int:
        """Percentage without a decoder."""
        return percent(self.unsupported, self.cameras)

    @property
    def wb_presets_percent(self) -> int:
        """Percentage with white-balance presets."""
        return percent(self.wb_presets, self.cameras)

    @property
    def noise_profiles_percent(self) -> int:
        """Percentage with noise profiles."""
        return percent(self.noise_profiles, self.cameras)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary, including derived totals and percentages."""
        data = asdict(self)
        data["supported"] = self.supported
        for name in (
            "rawspeed",
            "libraw",
            "supported",
            "unknown",
            "unsupported",
            "wb_presets",
            "noise_profiles",
        ):
            data[f"{name}_percent"] = getattr(self, f"{name}_percent")
        return data


def generate_stats(
    registry: Registry,
    *,
    include_unknown: bool = False,
    include_unsupported: bool = False,
) -> Stats:
    """Count cameras by decoder and profile availability.

    Records filtered out by include_record are skipped from every count,
    including the total.

    Parameters
    ----------
    registry : Registry
        Final registry.
    include_unknown : bool, optional
        Count cameras with ``Decoder.UNKNOWN``.
    include_unsupported : bool, optional
        Count cameras with ``Decoder.UNSET``.

    Returns
    -------
    Stats
        Aggregated counts.
    """
    stats = Stats()

    for record in registry.values():
        if not include_record(
            record, include_unknown=include_unknown, include_unsupported=include_unsupported
        ):
            continue

        if record.decoder is Decoder.UNSET:
            stats.unsupported += 1
        elif record.decoder is Decoder.UNKNOWN:
            stats.unknown += 1
        elif record.decoder is Decoder.RAWSPEED:
            stats.rawspeed += 1
        elif record.decoder is Decoder.LIBRAW:
            stats.libraw += 1

        stats.aliases += len(record.aliases)
        if record.wb_presets:
            stats.wb_presets += 1
        if record.noise_profiles:
            stats.noise_profiles += 1
        stats.cameras += 1

    return stats


def format_stats_summary(
    stats: Stats,
    *,
    include_unknown: bool = False,
    include_unsupported: bool = False,
) -> str:
    """Render statistics as the plain-text block printed by ``--stats stdout``."""
    lines = [
        f"Cameras:\t {stats.cameras:>4}",
        f"  RawSpeed:\t {stats.rawspeed:>4}  {stats.rawspeed_percent:>3}%",
        f"  LibRaw:\t {stats.libraw:>4}  {stats.libraw_percent:>3}%",
    ]
    if include_unknown or include_unsupported:
        lines.append(f"  Supported:\t {stats.supported:>4}  {stats.supported_percent:>3}%")
    if include_unknown:
        lines.append(f"  Unknown:\t {stats.unknown:>4}  {stats.unknown_percent:>3}%")
    if include_unsupported:
        lines.append(f"  Unsupported:\t {stats.unsupported:>4}  {stats.unsupported_percent:>3}%")
    lines.extend(
        [
            f"Aliases:\t {stats.aliases:>4}",
            f"WB Presets:\t {stats.wb_presets:>4}  {stats.wb_presets_percent:>3}%",
            f"Noise Profiles:\t {stats.noise_profiles:>4}  {stats.noise_profiles_percent:>3}%",
        ]
    )
    return "\n".join(lines) + "\n"
