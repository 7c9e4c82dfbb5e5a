"""
Type definitions shared by the styling encoders.

Key constraints:
- Style names match the OpenAPI 3.x parameter object exactly
- Value shapes form a closed set, decided at a single dispatch point
"""

from __future__ import annotations

from enum import Enum
from typing import Literal, Union

from .errors import UnsupportedStyleError


# ============================================================================
# Styles
# ============================================================================

class Style(str, Enum):
    """
    OpenAPI parameter serialization style.

    The string value is the exact name used in an OpenAPI document, so
    ``Style("deepObject") is Style.DEEP_OBJECT``.
    """
    SIMPLE = "simple"
    LABEL = "label"
    MATRIX = "matrix"
    FORM = "form"
    SPACE_DELIMITED = "spaceDelimited"
    PIPE_DELIMITED = "pipeDelimited"
    DEEP_OBJECT = "deepObject"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, style: Union["Style", str]) -> "Style":
        """
        Resolve a style name, failing hard on anything unrecognized.

        Raises:
            UnsupportedStyleError: If ``style`` is not a known style name.
        """
        if isinstance(style, cls):
            return style
        try:
            return cls(style)
        except ValueError:
            raise UnsupportedStyleError(style) from None


StyleName = Literal[
    "simple",
    "label",
    "matrix",
    "form",
    "spaceDelimited",
    "pipeDelimited",
    "deepObject",
]


# ============================================================================
# Value shapes
# ============================================================================

class Shape(Enum):
    """Runtime shape of a value handed to the styler."""
    ABSENT = "absent"
    SEQUENCE = "sequence"
    RECORD = "record"
    PRIMITIVE = "primitive"


# ============================================================================
# Parameter locations
# ============================================================================

ParameterLocation = Literal["path", "query", "header", "cookie"]

# OpenAPI defaults when a parameter object omits style/explode.
DEFAULT_STYLES: dict[str, tuple[Style, bool]] = {
    "path": (Style.SIMPLE, False),
    "header": (Style.SIMPLE, False),
    "query": (Style.FORM, True),
    "cookie": (Style.FORM, True),
}

ALLOWED_STYLES: dict[str, frozenset[Style]] = {
    "path": frozenset({Style.SIMPLE, Style.LABEL, Style.MATRIX}),
    "query": frozenset({
        Style.FORM,
        Style.SPACE_DELIMITED,
        Style.PIPE_DELIMITED,
        Style.DEEP_OBJECT,
    }),
    "header": frozenset({Style.SIMPLE}),
    "cookie": frozenset({Style.FORM}),
}
