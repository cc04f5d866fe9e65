"""farsitype: Persian/Arabic contextual shaping and visual reordering.

Turns logical Persian text into presentation-form glyphs laid out for
renderers that have no shaping or BiDi engine of their own.

Example:
    >>> from farsitype import format_with_order, OrderMode
    >>> format_with_order("سلام world", OrderMode.LTR)
"""

from __future__ import annotations

from farsitype.classify import (
    can_join_next,
    can_join_previous,
    find_first_script_index,
    is_script_member,
    is_separator,
    starts_with_script,
)
from farsitype.glyphs import (
    GLYPH_TABLE,
    Connection,
    FarsiLetter,
    GlyphForms,
    find_glyph_forms,
    lookup_base_char,
    resolve_glyph,
)
from farsitype.ordering import (
    OrderMode,
    auto_order,
    format_with_order,
    reorder_words_for_display,
    reverse_string,
    segment_and_reverse,
)
from farsitype.shaping import (
    ShapingOptions,
    connection_state,
    get_isolation_preference,
    set_isolation_preference,
    shape_character,
    shape_text,
)

__version__ = "0.1.0"

__all__ = [
    # Classification
    "is_script_member",
    "is_separator",
    "can_join_next",
    "can_join_previous",
    "find_first_script_index",
    "starts_with_script",
    # Glyph table
    "GLYPH_TABLE",
    "Connection",
    "FarsiLetter",
    "GlyphForms",
    "find_glyph_forms",
    "lookup_base_char",
    "resolve_glyph",
    # Shaping
    "ShapingOptions",
    "connection_state",
    "shape_character",
    "shape_text",
    "get_isolation_preference",
    "set_isolation_preference",
    # Ordering
    "OrderMode",
    "auto_order",
    "format_with_order",
    "segment_and_reverse",
    "reorder_words_for_display",
    "reverse_string",
    # Metadata
    "__version__",
]
