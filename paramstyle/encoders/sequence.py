"""Sequence styling: ordered lists of primitives."""

from __future__ import annotations

from typing import Any, Sequence, Union

from ..errors import FieldFormatError, UnsupportedScalarKindError, UnsupportedStyleError
from ..models import Style
from .primitive import primitive_to_string


def sequence_delimiters(style: Style, explode: bool, param_name: str) -> tuple[str, str]:
    """Return the (prefix, separator) pair for a sequence in ``style``."""

    if style is Style.SIMPLE:
        return "", ","
    if style is Style.LABEL:
        return ".", "." if explode else ","
    if style is Style.MATRIX:
        prefix = f";{param_name}="
        return prefix, prefix if explode else ","
    if style is Style.FORM:
        prefix = f"{param_name}="
        return prefix, f"&{prefix}" if explode else ","
    if style is Style.SPACE_DELIMITED:
        prefix = f"{param_name}="
        return prefix, f"&{prefix}" if explode else " "
    if style is Style.PIPE_DELIMITED:
        prefix = f"{param_name}="
        return prefix, f"&{prefix}" if explode else "|"

    raise UnsupportedStyleError(style)


def encode_sequence(
    style: Union[Style, str],
    explode: bool,
    param_name: str,
    values: Sequence[Any],
) -> str:
    """
    Style an ordered sequence of primitives.

    Element order is preserved. An empty sequence yields just the prefix.

    Raises:
        UnsupportedStyleError: For ``deepObject`` or an unknown style.
        FieldFormatError: If an element is not a primitive.
    """
    style = Style.parse(style)
    prefix, separator = sequence_delimiters(style, explode, param_name)

    parts: list[str] = []
    for index, item in enumerate(values):
        try:
            parts.append(primitive_to_string(item))
        except UnsupportedScalarKindError as e:
            raise FieldFormatError(param_name, e, field=index) from e

    return prefix + separator.join(parts)
