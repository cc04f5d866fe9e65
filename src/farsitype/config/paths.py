"""Centralized path definitions for farsitype.

Respects $XDG_CONFIG_HOME when set.
"""

from __future__ import annotations

import os
from pathlib import Path

_xdg_config = os.environ.get("XDG_CONFIG_HOME")

CONFIG_DIR = (
    (Path(_xdg_config) / "farsitype") if _xdg_config else (Path.home() / ".config" / "farsitype")
)
CONFIG_FILE = CONFIG_DIR / "config.toml"
