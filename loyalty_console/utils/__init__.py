"""Utility helpers for reusable functionality."""

from .datetime import parse_iso_datetime

__all__ = ["parse_iso_datetime"]
