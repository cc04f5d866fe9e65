"""Utility modules."""

from __future__ import annotations

from farsitype.utils.wrap import has_script, wrap_for_display

__all__ = [
    "has_script",
    "wrap_for_display",
]
