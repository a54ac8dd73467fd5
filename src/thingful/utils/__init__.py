"""Shared helpers."""

from .sanitize import sanitize

__all__ = ["sanitize"]
