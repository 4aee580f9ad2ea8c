"""Common utility functions for unionfind."""

from unionfind.utils.timestamps import get_iso_timestamp

__all__ = ["get_iso_timestamp"]
