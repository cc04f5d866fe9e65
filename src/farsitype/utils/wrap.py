"""Line wrapping for shaped RTL text.

Renderers wrap left to right, which reverses the line order when an already
reordered RTL string is longer than the display width.  This wraps each
paragraph in *logical* (reading) order first, then reorders every wrapped
line on its own so that visual line 1 is the start of the sentence.
"""

from __future__ import annotations

from farsitype.classify import find_first_script_index, is_script_member
from farsitype.ordering import OrderMode, format_with_order
from farsitype.shaping import ShapingOptions


def has_script(text: str) -> bool:
    """Return True if text contains any Persian/Arabic letters."""
    return any(is_script_member(c, include_specials=False) for c in text or "")


def _wrap_words(paragraph: str, width: int) -> list[str]:
    # Split on single spaces so runs of spaces and a trailing \r survive; only
    # the space a line break replaces is dropped.
    lines: list[str] = []
    current_words: list[str] = []
    current_len = 0

    for word in paragraph.split(" "):
        word_len = len(word)
        needed = word_len if not current_words else current_len + 1 + word_len
        if needed <= width or not current_words:
            current_words.append(word)
            current_len = needed
        else:
            lines.append(" ".join(current_words))
            current_words = [word]
            current_len = word_len

    lines.append(" ".join(current_words))
    return lines


def _line_mode(paragraph: str, mode: OrderMode) -> OrderMode:
    # One direction per paragraph, so every wrapped line agrees with the first.
    if mode is not OrderMode.DEFAULT:
        return mode
    return OrderMode.RTL if find_first_script_index(paragraph) == 0 else OrderMode.LTR


def wrap_for_display(
    text: str,
    width: int,
    mode: OrderMode | str = OrderMode.DEFAULT,
    options: ShapingOptions | None = None,
) -> str:
    """Wrap *text* to *width* columns and reorder each line for display.

    Paragraphs (separated by ``\\n``) are handled independently.  Text without
    script letters, or a non-positive *width*, is formatted paragraph by
    paragraph without wrapping.  Spacing inside a line is kept as written.
    """
    mode = OrderMode(mode)
    if not text:
        return text
    if width <= 0 or not has_script(text):
        return "\n".join(format_with_order(p, mode, options) for p in text.split("\n"))

    out: list[str] = []
    for paragraph in text.split("\n"):
        if len(paragraph) <= width:
            out.append(format_with_order(paragraph, mode, options))
            continue
        line_mode = _line_mode(paragraph, mode)
        out.extend(format_with_order(line, line_mode, options) for line in _wrap_words(paragraph, width))
    return "\n".join(out)
