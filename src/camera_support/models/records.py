"""Camera registry data models.

This module defines the record every source is reconciled into, the facts
extractors emit, and the closed set of decoder provenances.
"""

from dataclasses import asdict, dataclass, field
from enum import StrEnum
from typing import Any

__all__ = [
    "Decoder",
    "CameraRecord",
    "CameraFact",
    "Registry",
]


class Decoder(StrEnum):
    """Decoding path asserted for a camera.

    Attributes
    ----------
    UNSET : str
        No known decoding path (unsupported or merely referenced).
    RAWSPEED : str
        Primary decoder.
    LIBRAW : str
        Secondary decoder.
    UNKNOWN : str
        Only seen in a preset dataset, support cannot be asserted.
    """

    UNSET = ""
    RAWSPEED = "RawSpeed"
    LIBRAW = "LibRaw"
    UNKNOWN = "Unknown"

    @property
    def is_supported(self) -> bool:
        """Whether this provenance is a real decoding path."""
        return self in (Decoder.RAWSPEED, Decoder.LIBRAW)


def _sort_key(value: str) -> tuple[str, str]:
    return (value.casefold(), value)


def _insert_unique(values: list[str], value: str) -> bool:
    """Insert ``value`` keeping ``values`` sorted and case-insensitively unique."""
    folded = value.casefold()
    if any(v.casefold() == folded for v in values):
        return False
    values.append(value)
    values.sort(key=_sort_key)
    return True


@dataclass
class CameraRecord:
    """Reconciled view of one camera across all sources.

    Records are created by the first source that mentions their key and
    mutated in place by every later source; they are never removed.

    Attributes
    ----------
    maker : str
        Maker display string, last writer in pipeline order wins.
    model : str
        Model display string, last writer in pipeline order wins.
    aliases : list[str]
        Alternate model names, sorted, case-insensitively unique, never
        containing the model itself.
    formats : list[str]
        Decoding-mode tags from the structured dataset.
    wb_presets : bool
        Camera appears in the white-balance preset dataset.
    noise_profiles : bool
        Camera appears in the noise-profile dataset.
    rs_supported : str
        Verbatim support-status attribute of the structured dataset.
    decoder : Decoder
        Decoder provenance.
    debug : list[str]
        Diagnostic notes collected while merging.
    """

    maker: str = ""
    model: str = ""
    aliases: list[str] = field(default_factory=list)
    formats: list[str] = field(default_factory=list)
    wb_presets: bool = False
    noise_profiles: bool = False
    rs_supported: str = ""
    decoder: Decoder = Decoder.UNSET
    debug: list[str] = field(default_factory=list)

    def set_identity(self, maker: str, model: str) -> None:
        """Overwrite the display strings.

        An existing alias that now equals the model is dropped.
        """
        self.maker = maker
        self.model = model
        folded = model.casefold()
        self.aliases = [a for a in self.aliases if a.casefold() != folded]

    def add_alias(self, alias: str) -> bool:
        """Add an alternate model name.

        Returns
        -------
        bool
            True if the alias was new.
        """
        if not alias or alias.casefold() == self.model.casefold():
            return False
        return _insert_unique(self.aliases, alias)

    def add_format(self, tag: str) -> None:
        """Add a decoding-mode tag."""
        if tag not in self.formats:
            self.formats.append(tag)
            self.formats.sort()

    def add_debug(self, note: str) -> None:
        """Add a diagnostic note."""
        if note:
            _insert_unique(self.debug, note)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        data = asdict(self)
        data["decoder"] = str(self.decoder)
        return data


@dataclass(frozen=True)
class CameraFact:
    """Partial camera information extracted from one source entry.

    Attributes
    ----------
    maker : str
        Maker as written in the source.
    model : str
        Model as written in the source.
    aliases : tuple[str, ...]
        Alternate model names.
    format : str | None
        Decoding-mode tag, structured dataset only.
    supported : str | None
        Support-status value, structured dataset only.
    debug : tuple[str, ...]
        Diagnostics raised while extracting this entry.
    """

    maker: str
    model: str
    aliases: tuple[str, ...] = ()
    format: str | None = None
    supported: str | None = None
    debug: tuple[str, ...] = ()


Registry = dict[str, CameraRecord]
