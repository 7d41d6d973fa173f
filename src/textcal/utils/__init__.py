"""Shared helpers for textcal."""

from .vectors import is_vector, recycle

__all__ = ["is_vector", "recycle"]
