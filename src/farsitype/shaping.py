"""Contextual shaping: pick each letter's presentation form from its neighbours.

Shaping looks at a three-character window (previous, current, next) and never
backtracks, so every input character produces exactly one output glyph.

Whether a letter that is cut off from both neighbours inside a word uses its
isolated presentation form is controlled by :class:`ShapingOptions`.  Callers
may pass options explicitly; when they don't, the process-wide default set via
:func:`set_isolation_preference` is read once per call.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass

from farsitype.classify import (
    NUL,
    can_join_next,
    can_join_previous,
    is_script_member,
    is_separator,
)
from farsitype.glyphs import Connection, resolve_glyph

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShapingOptions:
    use_isolated: bool = True


_lock = threading.Lock()
_default_options = ShapingOptions()


def default_options() -> ShapingOptions:
    with _lock:
        return _default_options


def get_isolation_preference() -> bool:
    return default_options().use_isolated


def set_isolation_preference(value: bool) -> None:
    """Set the process-wide default for letters isolated inside a word."""
    global _default_options
    with _lock:
        _default_options = ShapingOptions(use_isolated=bool(value))
    logger.debug("Isolation preference set to %s", bool(value))


def connection_state(
    c: str,
    prev: str = NUL,
    next_char: str = NUL,
    options: ShapingOptions | None = None,
) -> Connection:
    """Decide how *c* joins its neighbours.

    A lone letter between two separators is a single-letter word and always
    stays ``DEFAULT``.  A letter with no join on either side inside a longer
    word is ``ISOLATED`` only when ``options.use_isolated`` is set.
    """
    if not is_script_member(c):
        return Connection.DEFAULT
    if options is None:
        options = default_options()

    is_end_compatible = is_script_member(next_char) and can_join_previous(next_char)
    connected_back = can_join_next(prev)
    connected_front = can_join_next(c) and is_end_compatible
    is_end = is_separator(next_char)

    if is_end and is_separator(prev):
        return Connection.DEFAULT
    if connected_back and not connected_front:
        return Connection.PREVIOUS
    if connected_front and not connected_back:
        return Connection.NEXT
    if not connected_back and not connected_front:
        return Connection.ISOLATED if options.use_isolated else Connection.DEFAULT
    return Connection.BOTH


def shape_character(
    c: str,
    prev: str = NUL,
    next_char: str = NUL,
    options: ShapingOptions | None = None,
) -> str:
    """Return the contextual glyph for *c*; non-script characters pass through."""
    if not is_script_member(c):
        return c
    return resolve_glyph(c, connection_state(c, prev, next_char, options))


def shape_text(text: str, options: ShapingOptions | None = None) -> str:
    """Shape every character of *text* against its real neighbours."""
    if not text:
        return text
    if options is None:
        options = default_options()

    glyphs: list[str] = []
    prev = NUL
    last = len(text) - 1
    for i, c in enumerate(text):
        next_char = text[i + 1] if i < last else NUL
        glyphs.append(shape_character(c, prev, next_char, options))
        prev = c
    return "".join(glyphs)
