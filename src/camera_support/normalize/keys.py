"""Camera key construction.

Every extractor, merge rule and the renderer's sort/group logic go through
these two functions, so sources that disagree on capitalization or spacing
("Canon" vs "CANON ") collapse onto the same registry entry.
"""

KEY_SEPARATOR = "\x1f"


def _fold(value: str) -> str:
    return " ".join(value.split()).casefold()


def camera_key(maker: str, model: str) -> str:
    """Build the normalized identity for a maker/model pair.

    Parameters
    ----------
    maker : str
        Maker display string as found in a source.
    model : str
        Model display string as found in a source.

    Returns
    -------
    str
        Case-folded maker and model joined by ``KEY_SEPARATOR``.

    Notes
    -----
    The separator sorts below every printable character, so an ascending
    sort keeps each maker's models contiguous and places "canon" before
    "canon inc".
    """
    return f"{_fold(maker)}{KEY_SEPARATOR}{_fold(model)}"


def key_maker(key: str) -> str:
    """Return the normalized maker part of a camera key."""
    return key.split(KEY_SEPARATOR, 1)[0]
