"""Tests for camera key construction."""

import pytest

from camera_support.normalize import KEY_SEPARATOR, camera_key, key_maker


@pytest.mark.unit
@pytest.mark.parametrize(
    ("left", "right"),
    [
        (("Canon", "EOS 5D"), ("CANON", "eos 5d")),
        (("Canon ", "EOS  5D"), ("Canon", "EOS 5D")),
        (("Leica", "M\tMonochrom"), ("leica", "m monochrom")),
    ],
)
def test_camera_key_ignores_case_and_spacing(
    left: tuple[str, str],
    right: tuple[str, str],
) -> None:
    """Test spelling variants collapse onto one key."""
    assert camera_key(*left) == camera_key(*right)


@pytest.mark.unit
def test_camera_key_keeps_maker_and_model_apart() -> None:
    """Test maker/model boundary is part of the key."""
    assert camera_key("Phase One", "IQ180") != camera_key("Phase", "One IQ180")
    assert camera_key("Canon", "EOS 5D") == f"canon{KEY_SEPARATOR}eos 5d"


@pytest.mark.unit
def test_sorted_keys_group_makers_contiguously() -> None:
    """Test shorter maker names sort before longer ones sharing a prefix."""
    keys = sorted(
        [
            camera_key("Canon Inc", "A"),
            camera_key("Canon", "Z"),
            camera_key("Canon", "A"),
        ]
    )

    assert [key_maker(k) for k in keys] == ["canon", "canon", "canon inc"]


@pytest.mark.unit
def test_key_maker_returns_normalized_maker() -> None:
    """Test maker part is extracted from a key."""
    assert key_maker(camera_key("NIKON ", "D70")) == "nikon"
