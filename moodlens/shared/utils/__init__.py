"""Shared utilities for MoodLens."""
from .audit import fingerprint_text

__all__ = ["fingerprint_text"]
