"""Command-line interface for camera_support."""

from camera_support.cli.main import cli

__all__ = ["cli"]
