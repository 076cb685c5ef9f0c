"""Common utility functions for wgkit."""

from wgkit.utils.timestamps import get_iso_timestamp

__all__ = ["get_iso_timestamp"]
