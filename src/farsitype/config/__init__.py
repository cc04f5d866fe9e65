"""Configuration management for farsitype."""

from __future__ import annotations

from farsitype.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
