"""Pytest configuration and fixtures for test suite."""

import sys
from collections.abc import Callable
from pathlib import Path

import pytest

# Add src directory to path for imports
SRC_PATH = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(SRC_PATH))

from camera_support.models import CameraRecord, Decoder  # noqa: E402

FIXTURES_DIR = Path(__file__).parent / "fixtures"

FIXTURE_FILES = {
    "rawspeed": "cameras.xml",
    "libraw": "imageio_libraw.c",
    "wb_presets": "wb_presets.json",
    "noise_profiles": "noiseprofiles.json",
    "rawspeed_dng": "rawspeed-dng.csv",
}

EMPTY_PAYLOADS = {
    "rawspeed": b"<Cameras></Cameras>",
    "wb_presets": b'{"wb_presets": []}',
    "noise_profiles": b'{"noiseprofiles": []}',
    "rawspeed_dng": b"",
}


@pytest.fixture
def make_record() -> Callable[..., CameraRecord]:
    """Factory for registry records with minimal boilerplate."""

    def _factory(
        maker: str = "Acme",
        model: str = "X100",
        *,
        aliases: list[str] | None = None,
        formats: list[str] | None = None,
        wb_presets: bool = False,
        noise_profiles: bool = False,
        rs_supported: str = "",
        decoder: Decoder = Decoder.RAWSPEED,
        debug: list[str] | None = None,
    ) -> CameraRecord:
        return CameraRecord(
            maker=maker,
            model=model,
            aliases=aliases or [],
            formats=formats or [],
            wb_presets=wb_presets,
            noise_profiles=noise_profiles,
            rs_supported=rs_supported,
            decoder=decoder,
            debug=debug or [],
        )

    return _factory


@pytest.fixture
def fixture_paths() -> dict[str, Path]:
    """Paths of the sample datasets keyed by source name."""
    return {source: FIXTURES_DIR / name for source, name in FIXTURE_FILES.items()}


@pytest.fixture
def fixture_payloads(fixture_paths: dict[str, Path]) -> dict[str, bytes]:
    """Sample dataset payloads keyed by source name."""
    return {source: path.read_bytes() for source, path in fixture_paths.items()}


@pytest.fixture
def make_payloads() -> Callable[..., dict[str, bytes]]:
    """Factory for in-memory payloads; unspecified sources are empty."""

    def _factory(**overrides: bytes) -> dict[str, bytes]:
        payloads = dict(EMPTY_PAYLOADS)
        payloads.update(overrides)
        return payloads

    return _factory
