"""CLI entry point for farsitype.

Shapes and reorders Persian text for display in terminals and other
renderers without BiDi support, and exposes the glyph table for inspection.
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any, NoReturn

import click
from rich.console import Console
from rich.table import Table

from farsitype import __version__
from farsitype.classify import NUL
from farsitype.config.paths import CONFIG_FILE
from farsitype.config.settings import Settings
from farsitype.glyphs import GLYPH_TABLE, FarsiLetter
from farsitype.ordering import OrderMode, format_with_order
from farsitype.shaping import ShapingOptions, connection_state, shape_character, shape_text
from farsitype.utils.wrap import wrap_for_display

logger = logging.getLogger(__name__)

DEMO_TEXT = (
    "سلام دنیا hello world hastam چطوری خوبی؟ ablah? حتما باید رو یک متن "
    "bozorg testesh konamm man    همین."
)

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _json_output(data: Any, *, compact: bool = False) -> None:
    """Print *data* as JSON to stdout."""
    indent = None if compact else 2
    click.echo(json.dumps(data, indent=indent, ensure_ascii=False, default=str))


def _error(msg: str) -> NoReturn:
    """Print an error message to stderr and exit with code 1."""
    click.echo(f"Error: {msg}", err=True)
    sys.exit(1)


def _codepoint(c: str) -> str:
    return f"U+{ord(c):04X}"


def _load_settings(path: Path) -> Settings:
    try:
        return Settings.load(path)
    except (OSError, ValueError) as exc:
        # tomllib.TOMLDecodeError is a ValueError.
        _error(f"Could not read config {path}: {exc}")


# ---------------------------------------------------------------------------
# Main group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(version=__version__, prog_name="farsitype")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=CONFIG_FILE,
    show_default=True,
    help="Path to the TOML config file.",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def main(ctx: click.Context, config_path: Path, verbose: bool) -> None:
    """farsitype -- Persian text shaping and reordering for plain renderers."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["settings"] = _load_settings(config_path)


# ---------------------------------------------------------------------------
# Shaping
# ---------------------------------------------------------------------------


@main.command()
@click.argument("text", nargs=-1)
@click.option(
    "--order",
    "-o",
    type=click.Choice([m.value for m in OrderMode], case_sensitive=False),
    default=None,
    help="Display order (defaults to the configured order).",
)
@click.option(
    "--isolated/--no-isolated",
    default=None,
    help="Use isolated forms for letters cut off inside a word.",
)
@click.option("--width", "-w", type=int, default=None, help="Wrap lines to this many columns.")
@click.option("--no-reorder", is_flag=True, help="Only shape glyphs, keep logical order.")
@click.pass_context
def shape(
    ctx: click.Context,
    text: tuple[str, ...],
    order: str | None,
    isolated: bool | None,
    width: int | None,
    no_reorder: bool,
) -> None:
    """Shape TEXT for display, or each line of stdin when TEXT is omitted."""
    settings: Settings = ctx.obj["settings"]
    mode = OrderMode(order.lower()) if order else settings.order_mode
    options = (
        ShapingOptions(use_isolated=isolated) if isolated is not None else settings.shaping_options()
    )
    wrap_width = width if width is not None else settings.wrap_width
    if wrap_width < 0:
        _error("--width must not be negative.")

    if text:
        lines = [" ".join(text)]
    else:
        lines = sys.stdin.read().splitlines()

    logger.debug("Formatting %d line(s) with order=%s width=%d", len(lines), mode, wrap_width)
    for line in lines:
        if no_reorder:
            click.echo(shape_text(line, options))
        elif wrap_width:
            click.echo(wrap_for_display(line, wrap_width, mode, options))
        else:
            click.echo(format_with_order(line, mode, options))


@main.command()
@click.argument("text")
@click.option("--json", "as_json", is_flag=True, help="Print JSON instead of a table.")
@click.pass_context
def inspect(ctx: click.Context, text: str, as_json: bool) -> None:
    """Show the connection state and glyph chosen for every character of TEXT."""
    options = ctx.obj["settings"].shaping_options()
    rows: list[dict[str, str]] = []
    for i, c in enumerate(text):
        prev = text[i - 1] if i > 0 else NUL
        next_char = text[i + 1] if i + 1 < len(text) else NUL
        glyph = shape_character(c, prev, next_char, options)
        rows.append(
            {
                "char": c,
                "codepoint": _codepoint(c),
                "connection": connection_state(c, prev, next_char, options).value,
                "glyph": glyph,
                "glyph_codepoint": _codepoint(glyph),
            }
        )

    if as_json:
        _json_output(rows)
        return

    table = Table(title="Shaping")
    for column in ("#", "Char", "Codepoint", "Connection", "Glyph", "Glyph codepoint"):
        table.add_column(column)
    for i, row in enumerate(rows):
        table.add_row(
            str(i),
            row["char"],
            row["codepoint"],
            row["connection"],
            row["glyph"],
            row["glyph_codepoint"],
        )
    Console().print(table)


# ---------------------------------------------------------------------------
# Glyph table
# ---------------------------------------------------------------------------


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Print JSON instead of a table.")
def letters(as_json: bool) -> None:
    """List every letter with its presentation forms."""
    if as_json:
        _json_output(
            [
                {
                    "name": letter.name,
                    "index": int(letter),
                    **{
                        form: _codepoint(getattr(GLYPH_TABLE[letter], form))
                        for form in ("letter", "isolated", "initial", "medial", "final")
                    },
                }
                for letter in FarsiLetter
            ]
        )
        return

    table = Table(title="Glyph table")
    for column in ("Letter", "Base", "Isolated", "Initial", "Medial", "Final"):
        table.add_column(column)
    for letter in FarsiLetter:
        forms = GLYPH_TABLE[letter]
        table.add_row(letter.name, *(_codepoint(c) for c in forms.all_forms()))
    Console().print(table)


@main.command()
@click.pass_context
def demo(ctx: click.Context) -> None:
    """Format a mixed Persian/English sample sentence."""
    settings: Settings = ctx.obj["settings"]
    click.echo(DEMO_TEXT)
    click.echo(format_with_order(DEMO_TEXT, settings.order_mode, settings.shaping_options()))
