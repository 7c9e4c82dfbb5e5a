"""
Parameter styler.

Entry point used by generated API clients to turn one
(style, explode, name, value) tuple into the wire text of that parameter,
following the OpenAPI 3.x ``style`` / ``explode`` rules.

The result is NOT percent-encoded; callers escape it for the URL or header
it ends up in.
"""

import logging
from collections.abc import Sequence
from typing import Any, Union

from .encoders import encode_primitive, encode_record, encode_sequence, is_record
from .errors import AbsentValueError
from .models import Shape, Style

logger = logging.getLogger(__name__)


def classify_shape(value: Any) -> Shape:
    """Decide which encoder handles ``value``."""

    if value is None:
        return Shape.ABSENT
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return Shape.SEQUENCE
    if is_record(value):
        return Shape.RECORD
    return Shape.PRIMITIVE


def style_param(
    style: Union[Style, str],
    explode: bool,
    param_name: str,
    value: Any,
) -> str:
    """
    Serialize a parameter value according to its style and explode flag.

    Args:
        style: One of simple, label, matrix, form, spaceDelimited,
            pipeDelimited or deepObject
        explode: OpenAPI explode flag; deepObject requires True
        param_name: Parameter name, used verbatim and unescaped
        value: A primitive, a sequence of primitives, or a flat record

    Returns:
        The styled parameter text

    Raises:
        UnsupportedStyleError: Unknown style, or a style the value's shape
            does not support
        AbsentValueError: ``value`` is None
        InvalidDeepObjectUsageError: deepObject without explode
        UnsupportedScalarKindError: A bare value that is not a primitive
        FieldFormatError: A record field or sequence element that is not a
            primitive

    Example:
        >>> style_param("matrix", True, "id", [3, 4, 5])
        ';id=3;id=4;id=5'
    """
    style = Style.parse(style)
    shape = classify_shape(value)
    logger.debug("Styling %s parameter '%s' as %s (explode=%s)", shape.value, param_name, style, explode)

    if shape is Shape.ABSENT:
        raise AbsentValueError(param_name)
    if shape is Shape.SEQUENCE:
        return encode_sequence(style, explode, param_name, list(value))
    if shape is Shape.RECORD:
        return encode_record(style, explode, param_name, value)
    return encode_primitive(style, explode, param_name, value)
