"""Persian letters and their contextual presentation forms.

Every letter is keyed by :class:`FarsiLetter` and owns one :class:`GlyphForms`
record holding its base codepoint and the four Arabic Presentation Forms
codepoints (isolated, initial, medial, final).  Letters that never join
forward reuse the base or final codepoint for the forms they do not have.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, StrEnum, auto


class Connection(StrEnum):
    """How a character joins its neighbours within a word."""

    DEFAULT = auto()
    ISOLATED = auto()
    PREVIOUS = auto()
    NEXT = auto()
    BOTH = auto()


class FarsiLetter(IntEnum):
    """Persian letters and Lam-Alef ligatures, in glyph table order."""

    ALEF_HAMZEH_ABOVE = 0  # أ
    ALEF = auto()  # ا
    ALEF_MAD_ABOVE = auto()  # آ
    HAMZEH = auto()  # ء
    VAAV_HAMZEH_ABOVE = auto()  # ؤ
    ALEF_HAMZEH_BELOW = auto()  # إ
    YEH_HAMZEH_ABOVE = auto()  # ئ
    BEH = auto()  # ب
    PEH = auto()  # پ
    TEH = auto()  # ت
    SEH = auto()  # ث
    JEEM = auto()  # ج
    CHEH = auto()  # چ
    HEH_JEEMY = auto()  # ح
    KHEH = auto()  # خ
    DAAL = auto()  # د
    ZAAL = auto()  # ذ
    REH = auto()  # ر
    ZEH = auto()  # ز
    JEH = auto()  # ژ
    SEEN = auto()  # س
    SHEEN = auto()  # ش
    SAAD = auto()  # ص
    ZAAD = auto()  # ض
    TAAH = auto()  # ط
    ZAAH = auto()  # ظ
    AIN = auto()  # ع
    GHAIN = auto()  # غ
    FEH = auto()  # ف
    QAAF = auto()  # ق
    KAAF = auto()  # ک
    GAAF = auto()  # گ
    LAAM = auto()  # ل
    MEEM = auto()  # م
    NOON = auto()  # ن
    VAAV = auto()  # و
    HEH = auto()  # ه
    YEH = auto()  # ی
    ARABIC_YEH = auto()  # ي
    LAAM_ALEF = auto()  # لا
    LAAM_ALEF_HAMZEH_ABOVE = auto()  # لأ
    LAAM_ALEF_MAD_ABOVE = auto()  # لآ


@dataclass(frozen=True, slots=True)
class GlyphForms:
    letter: str
    isolated: str
    initial: str
    medial: str
    final: str

    def all_forms(self) -> tuple[str, str, str, str, str]:
        return (self.letter, self.isolated, self.initial, self.medial, self.final)

    def matches(self, c: str) -> bool:
        """Return True if *c* is the base letter or any of its presentation forms."""
        return c in self.all_forms()

    def form_for(self, state: Connection) -> str:
        match state:
            case Connection.ISOLATED:
                return self.isolated
            case Connection.NEXT:
                return self.initial
            case Connection.BOTH:
                return self.medial
            case Connection.PREVIOUS:
                return self.final
            case _:
                return self.letter


# (base, isolated, initial, medial, final)
GLYPH_TABLE: dict[FarsiLetter, GlyphForms] = {
    FarsiLetter.ALEF_HAMZEH_ABOVE: GlyphForms("\u0623", "\uFE83", "\u0623", "\uFE84", "\uFE84"),  # أ
    FarsiLetter.ALEF: GlyphForms("\u0627", "\uFE8D", "\u0627", "\uFE8E", "\uFE8E"),  # ا
    FarsiLetter.ALEF_MAD_ABOVE: GlyphForms("\u0622", "\uFE81", "\u0622", "\uFE82", "\uFE82"),  # آ
    FarsiLetter.HAMZEH: GlyphForms("\u0621", "\uFE80", "\u0621", "\u0621", "\u0621"),  # ء
    FarsiLetter.VAAV_HAMZEH_ABOVE: GlyphForms("\u0624", "\uFE85", "\u0624", "\uFE86", "\uFE86"),  # ؤ
    FarsiLetter.ALEF_HAMZEH_BELOW: GlyphForms("\u0625", "\uFE87", "\u0625", "\uFE88", "\uFE88"),  # إ
    FarsiLetter.YEH_HAMZEH_ABOVE: GlyphForms("\u0626", "\uFE89", "\uFE8B", "\uFE8C", "\uFE8A"),  # ئ
    FarsiLetter.BEH: GlyphForms("\u0628", "\uFE8F", "\uFE91", "\uFE92", "\uFE90"),  # ب
    FarsiLetter.PEH: GlyphForms("\u067E", "\uFB56", "\uFB58", "\uFB59", "\uFB57"),  # پ
    FarsiLetter.TEH: GlyphForms("\u062A", "\uFE95", "\uFE97", "\uFE98", "\uFE96"),  # ت
    FarsiLetter.SEH: GlyphForms("\u062B", "\uFE99", "\uFE9B", "\uFE9C", "\uFE9A"),  # ث
    FarsiLetter.JEEM: GlyphForms("\u062C", "\uFE9D", "\uFE9F", "\uFEA0", "\uFE9E"),  # ج
    FarsiLetter.CHEH: GlyphForms("\u0686", "\uFB7A", "\uFB7C", "\uFB7D", "\uFB7B"),  # چ
    FarsiLetter.HEH_JEEMY: GlyphForms("\u062D", "\uFEA1", "\uFEA3", "\uFEA4", "\uFEA2"),  # ح
    FarsiLetter.KHEH: GlyphForms("\u062E", "\uFEA5", "\uFEA7", "\uFEA8", "\uFEA6"),  # خ
    FarsiLetter.DAAL: GlyphForms("\u062F", "\uFEA9", "\u062F", "\uFEAA", "\uFEAA"),  # د
    FarsiLetter.ZAAL: GlyphForms("\u0630", "\uFEAB", "\u0630", "\uFEAC", "\uFEAC"),  # ذ
    FarsiLetter.REH: GlyphForms("\u0631", "\uFEAD", "\u0631", "\uFEAE", "\uFEAE"),  # ر
    FarsiLetter.ZEH: GlyphForms("\u0632", "\uFEAF", "\u0632", "\uFEB0", "\uFEB0"),  # ز
    FarsiLetter.JEH: GlyphForms("\u0698", "\uFB8A", "\u0698", "\uFB8B", "\uFB8B"),  # ژ
    FarsiLetter.SEEN: GlyphForms("\u0633", "\uFEB1", "\uFEB3", "\uFEB4", "\uFEB2"),  # س
    FarsiLetter.SHEEN: GlyphForms("\u0634", "\uFEB5", "\uFEB7", "\uFEB8", "\uFEB6"),  # ش
    FarsiLetter.SAAD: GlyphForms("\u0635", "\uFEB9", "\uFEBB", "\uFEBC", "\uFEBA"),  # ص
    FarsiLetter.ZAAD: GlyphForms("\u0636", "\uFEBD", "\uFEBF", "\uFEC0", "\uFEBE"),  # ض
    FarsiLetter.TAAH: GlyphForms("\u0637", "\uFEC1", "\uFEC3", "\uFEC4", "\uFEC2"),  # ط
    FarsiLetter.ZAAH: GlyphForms("\u0638", "\uFEC5", "\uFEC7", "\uFEC8", "\uFEC6"),  # ظ
    FarsiLetter.AIN: GlyphForms("\u0639", "\uFEC9", "\uFECB", "\uFECC", "\uFECA"),  # ع
    FarsiLetter.GHAIN: GlyphForms("\u063A", "\uFECD", "\uFECF", "\uFED0", "\uFECE"),  # غ
    FarsiLetter.FEH: GlyphForms("\u0641", "\uFED1", "\uFED3", "\uFED4", "\uFED2"),  # ف
    FarsiLetter.QAAF: GlyphForms("\u0642", "\uFED5", "\uFED7", "\uFED8", "\uFED6"),  # ق
    FarsiLetter.KAAF: GlyphForms("\u06A9", "\uFED9", "\uFEDB", "\uFEDC", "\uFEDA"),  # ک
    FarsiLetter.GAAF: GlyphForms("\u06AF", "\uFB92", "\uFB94", "\uFB95", "\uFB93"),  # گ
    FarsiLetter.LAAM: GlyphForms("\u0644", "\uFEDD", "\uFEDF", "\uFEE0", "\uFEDE"),  # ل
    FarsiLetter.MEEM: GlyphForms("\u0645", "\uFEE1", "\uFEE3", "\uFEE4", "\uFEE2"),  # م
    FarsiLetter.NOON: GlyphForms("\u0646", "\uFEE5", "\uFEE7", "\uFEE8", "\uFEE6"),  # ن
    FarsiLetter.VAAV: GlyphForms("\u0648", "\uFEED", "\uFEED", "\uFEEE", "\uFEEE"),  # و
    FarsiLetter.HEH: GlyphForms("\u0647", "\uFEE9", "\uFEEB", "\uFEEC", "\uFEEA"),  # ه
    FarsiLetter.YEH: GlyphForms("\u06CC", "\uFBFC", "\uFBFE", "\uFBFF", "\uFBFD"),  # ی
    FarsiLetter.ARABIC_YEH: GlyphForms("\u064A", "\uFEF1", "\uFEF3", "\uFEF4", "\uFEF2"),  # ي
    FarsiLetter.LAAM_ALEF: GlyphForms("\uFEFB", "\uFEFB", "\uFEFB", "\uFEFC", "\uFEFC"),  # لا
    FarsiLetter.LAAM_ALEF_HAMZEH_ABOVE: GlyphForms("\uFEF7", "\uFEF7", "\uFEF7", "\uFEF8", "\uFEF8"),  # لأ
    FarsiLetter.LAAM_ALEF_MAD_ABOVE: GlyphForms("\uFEF5", "\uFEF5", "\uFEF5", "\uFEF6", "\uFEF6"),  # لآ
}

_missing = set(FarsiLetter) - GLYPH_TABLE.keys()
if _missing:
    raise RuntimeError(f"Glyph table has no entry for {sorted(m.name for m in _missing)}")
del _missing


def _build_form_index() -> dict[str, GlyphForms]:
    # First record in table order wins when a codepoint is shared.
    index: dict[str, GlyphForms] = {}
    for letter in FarsiLetter:
        forms = GLYPH_TABLE[letter]
        for c in forms.all_forms():
            index.setdefault(c, forms)
    return index


_FORM_INDEX = _build_form_index()


def find_glyph_forms(c: str) -> GlyphForms | None:
    """Return the record owning *c* (base letter or any presentation form)."""
    return _FORM_INDEX.get(c)


def resolve_glyph(c: str, state: Connection) -> str:
    """Map *c* to the presentation form for *state*.

    ``Connection.DEFAULT`` and characters without a record return *c* as-is.
    Already-shaped input resolves through the same record, so re-shaping is
    idempotent.
    """
    if state is Connection.DEFAULT:
        return c
    forms = _FORM_INDEX.get(c)
    if forms is None:
        return c
    return forms.form_for(state)


def lookup_base_char(letter: FarsiLetter | int) -> str:
    """Return the base (unshaped) codepoint of *letter*.

    Accepts a :class:`FarsiLetter` or its integer value; an integer outside
    the enumeration raises ``ValueError``.
    """
    return GLYPH_TABLE[FarsiLetter(letter)].letter
