"""Settings management using TOML configuration."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Self

from farsitype.config.paths import CONFIG_FILE
from farsitype.ordering import OrderMode
from farsitype.shaping import ShapingOptions

logger = logging.getLogger(__name__)


@dataclass
class ShapingSettings:
    use_isolated: bool = True


@dataclass
class DisplaySettings:
    order: str = "default"
    wrap_width: int = 0  # 0 = no wrapping


SECTION_MAP: dict[str, type] = {
    "shaping": ShapingSettings,
    "display": DisplaySettings,
}


@dataclass
class Settings:
    shaping: ShapingSettings = field(default_factory=ShapingSettings)
    display: DisplaySettings = field(default_factory=DisplaySettings)

    @classmethod
    def load(cls, path: Path = CONFIG_FILE) -> Self:
        settings = cls()

        if not path.exists():
            logger.debug("No config at %s, writing defaults", path)
            settings._create_default(path)
            return settings

        with open(path, "rb") as f:
            data = tomllib.load(f)

        for section_name in SECTION_MAP:
            if section_name in data:
                section_data = data[section_name]
                section_instance = getattr(settings, section_name)
                for f_info in fields(section_instance):
                    if f_info.name in section_data:
                        setattr(section_instance, f_info.name, section_data[f_info.name])

        logger.debug("Loaded settings from %s", path)
        return settings

    def save(self, path: Path = CONFIG_FILE) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        lines: list[str] = []

        for section_name in SECTION_MAP:
            section = getattr(self, section_name)
            lines.append(f"[{section_name}]")
            for f_info in fields(section):
                value = getattr(section, f_info.name)
                lines.append(f"{f_info.name} = {_format_toml_value(value)}")
            lines.append("")

        path.write_text("\n".join(lines), encoding="utf-8")

    def _create_default(self, path: Path) -> None:
        self.save(path)

    @property
    def order_mode(self) -> OrderMode:
        try:
            return OrderMode(str(self.display.order).lower())
        except ValueError:
            logger.warning(
                "Invalid display.order %r in config, using %r",
                self.display.order,
                OrderMode.DEFAULT.value,
            )
            return OrderMode.DEFAULT

    @property
    def wrap_width(self) -> int:
        width = self.display.wrap_width
        if isinstance(width, bool) or not isinstance(width, int) or width < 0:
            logger.warning("Invalid display.wrap_width %r in config, wrapping disabled", width)
            return 0
        return width

    def shaping_options(self) -> ShapingOptions:
        use_isolated = self.shaping.use_isolated
        if not isinstance(use_isolated, bool):
            logger.warning("Invalid shaping.use_isolated %r in config, using true", use_isolated)
            use_isolated = True
        return ShapingOptions(use_isolated=use_isolated)


def _format_toml_value(value: object) -> str:
    match value:
        case bool():
            return "true" if value else "false"
        case int():
            return str(value)
        case str():
            escaped = value.replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        case _:
            return repr(value)


_settings: Settings | None = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings
