"""Character classification for Persian/Arabic script shaping."""

from __future__ import annotations

from farsitype.glyphs import FarsiLetter, lookup_base_char

NUL = "\0"

# Arabic, Arabic Supplement, Arabic Extended-A, Presentation Forms-A and -B.
_SCRIPT_RANGES: tuple[tuple[int, int], ...] = (
    (0x0600, 0x06FF),
    (0x0750, 0x077F),
    (0x08A0, 0x08FF),
    (0xFB50, 0xFDFF),
    (0xFE70, 0xFEFF),
)

_EXTRA_MEMBERS = frozenset({"\u0627", "\u06CC"})  # ALEF, Persian YEH

# Line breaks and full stops travel with an RTL run instead of splitting it.
_SPECIALS = frozenset({"\r", "\n", "."})

_NON_JOINING_NEXT = frozenset(
    lookup_base_char(letter)
    for letter in (
        FarsiLetter.ALEF,
        FarsiLetter.ALEF_HAMZEH_ABOVE,
        FarsiLetter.ALEF_HAMZEH_BELOW,
        FarsiLetter.ALEF_MAD_ABOVE,
        FarsiLetter.HAMZEH,
        FarsiLetter.VAAV_HAMZEH_ABOVE,
        FarsiLetter.JEH,
        FarsiLetter.VAAV,
    )
)
_DAAL_TO_ZEH = (lookup_base_char(FarsiLetter.DAAL), lookup_base_char(FarsiLetter.ZEH))

_NON_JOINING_PREVIOUS = frozenset(
    {
        "\r",
        "\n",
        ".",
        "\u061F",  # Arabic question mark
        "\u060C",  # Arabic comma
        "\u061B",  # Arabic semicolon
        "\u066B",  # Arabic decimal separator
        "\u066C",  # Arabic thousands separator
    }
)


def is_script_member(c: str, include_specials: bool = True) -> bool:
    """Return True if *c* belongs to the Persian/Arabic script ranges.

    With *include_specials*, carriage return, line feed and ``.`` also count
    as members so they stay inside a right-to-left run.
    """
    if include_specials and c in _SPECIALS:
        return True
    if c in _EXTRA_MEMBERS:
        return True
    if len(c) != 1:
        return False
    cp = ord(c)
    return any(lo <= cp <= hi for lo, hi in _SCRIPT_RANGES)


def is_separator(c: str) -> bool:
    """Return True for the word boundaries: NUL and space."""
    return c == NUL or c == " "


def can_join_next(c: str) -> bool:
    """Return True if *c* offers a trailing connector to the following letter."""
    if is_separator(c) or not is_script_member(c, include_specials=False):
        return False
    if c in _NON_JOINING_NEXT:
        return False
    return not (_DAAL_TO_ZEH[0] <= c <= _DAAL_TO_ZEH[1])


def can_join_previous(c: str) -> bool:
    """Return False for punctuation that never accepts a join from the letter before it."""
    return c not in _NON_JOINING_PREVIOUS


def find_first_script_index(text: str) -> int:
    """Index of the first script member in *text*, or -1 when there is none."""
    for i, c in enumerate(text or ""):
        if is_script_member(c):
            return i
    return -1


def starts_with_script(text: str) -> bool:
    return bool(text) and is_script_member(text[0])
