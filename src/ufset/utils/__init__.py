"""Shared utilities for ufset."""

from ufset.utils.timestamps import get_iso_timestamp

__all__ = ["get_iso_timestamp"]
