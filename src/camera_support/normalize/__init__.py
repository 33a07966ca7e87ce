"""Identity normalization for camera records."""

from camera_support.normalize.keys import KEY_SEPARATOR, camera_key, key_maker

__all__ = ["KEY_SEPARATOR", "camera_key", "key_maker"]
