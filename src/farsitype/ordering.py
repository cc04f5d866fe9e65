"""Visual reordering of shaped text for left-to-right-only renderers.

Renderers without BiDi support draw characters left to right, so script runs
must be stored reversed and, for right-to-left paragraphs, the runs themselves
must be emitted in reverse order.  This is done in two passes over the shaped
string: :func:`segment_and_reverse` reverses characters inside runs, then
:func:`reorder_words_for_display` reverses the order of the runs.
"""

from __future__ import annotations

from enum import StrEnum

from farsitype.classify import is_script_member, is_separator
from farsitype.shaping import ShapingOptions, shape_text


class OrderMode(StrEnum):
    """Which composition of shaping and reordering to apply."""

    DEFAULT = "default"
    LTR = "ltr"
    RTL = "rtl"


def reverse_string(text: str) -> str:
    if not text:
        return text
    return text[::-1]


def _append_run(parts: list[str], run: str, reverse: bool) -> None:
    parts.append(run[::-1] if reverse else run)


def segment_and_reverse(text: str, all_runs_rtl: bool = False) -> str:
    """Split *text* into script/non-script runs and reverse run contents.

    With *all_runs_rtl* every run is reversed.  Otherwise only script runs
    are, and a run boundary is only placed where the newly seen character is
    not a separator, so spaces between two script words stay inside the
    script run.  When a script run is closed its boundary moves back one
    position: the character just before the first non-script, non-separator
    character (usually the last space) starts the following run.
    """
    if not text:
        return text

    parts: list[str] = []
    start = 0
    in_script = is_script_member(text[0])
    i = 0
    while i < len(text):
        current = is_script_member(text[i])
        if current != in_script:
            close = all_runs_rtl
            if not all_runs_rtl and not is_separator(text[i]):
                if in_script:
                    i -= 1
                close = True
            if close:
                _append_run(parts, text[start:i], in_script or all_runs_rtl)
                in_script = current
                start = i
        i += 1

    _append_run(parts, text[start:], in_script or all_runs_rtl)
    return "".join(parts)


def reorder_words_for_display(text: str) -> str:
    """Emit the runs of *text* from last to first.

    Non-script runs are reversed back into left-to-right order as they are
    flushed; script runs are copied as they stand.
    """
    if not text:
        return text

    parts: list[str] = []
    in_script = is_script_member(text[-1])
    end = len(text)
    for i in range(len(text) - 1, -1, -1):
        current = is_script_member(text[i])
        if current != in_script:
            _append_run(parts, text[i + 1 : end], not in_script)
            end = i + 1
            in_script = current

    _append_run(parts, text[:end], not in_script)
    return "".join(parts)


def auto_order(text: str, options: ShapingOptions | None = None) -> str:
    """Shape *text* and pick the paragraph direction from its first character.

    Text starting with a script character is laid out right to left (runs
    reversed and reordered); anything else stays left to right with only its
    script runs reversed.
    """
    if not text:
        return text
    shaped = shape_text(text, options)
    use_rtl = is_script_member(shaped[0])
    reordered = segment_and_reverse(shaped, all_runs_rtl=use_rtl)
    if not use_rtl:
        return reordered
    return reorder_words_for_display(reordered)


def format_with_order(
    text: str,
    mode: OrderMode | str = OrderMode.DEFAULT,
    options: ShapingOptions | None = None,
) -> str:
    """Shape *text* and reorder it for display according to *mode*."""
    match OrderMode(mode):
        case OrderMode.LTR:
            return segment_and_reverse(shape_text(text, options), all_runs_rtl=False)
        case OrderMode.RTL:
            return reorder_words_for_display(
                segment_and_reverse(shape_text(text, options), all_runs_rtl=True)
            )
        case _:
            return auto_order(text, options)
