"""Shared data types for camera_support.

Domain-specific types live closer to their consumers:
- Configuration types → camera_support.engine.config
- Statistics → camera_support.report.stats
"""

from camera_support.models.records import CameraFact, CameraRecord, Decoder, Registry

__all__ = [
    "CameraFact",
    "CameraRecord",
    "Decoder",
    "Registry",
]
