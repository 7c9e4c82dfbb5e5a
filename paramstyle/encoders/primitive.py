"""Primitive value formatting shared by every encoder.

A primitive always renders to the same text whether it is a bare parameter,
a sequence element or a record field. Timestamps are not primitives, but
their fixed RFC 3339 rendering lives here too so that all scalar text
formatting sits in one module.
"""

from __future__ import annotations

import math
import numbers
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
from enum import Enum
from typing import Any, Union

from ..errors import UnsupportedScalarKindError, UnsupportedStyleError
from ..models import Style


def _format_float(value: float) -> str:
    """Shortest round-trip digits, never in exponent notation."""

    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"

    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def primitive_to_string(value: Any) -> str:
    """
    Convert a single primitive to its canonical text.

    Dispatches on the scalar kind rather than the concrete type, so enum
    members and numpy scalars format like the builtin they wrap.

    Raises:
        UnsupportedScalarKindError: If the value is not an integer, float,
            boolean or string.
    """
    if isinstance(value, Enum):
        value = value.value

    # bool is an Integral, check it first
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, numbers.Integral):
        return str(int(value))
    if isinstance(value, numbers.Real):
        return _format_float(float(value))
    if isinstance(value, str):
        return str(value)

    raise UnsupportedScalarKindError(value)


def format_timestamp(value: Union[datetime, date]) -> str:
    """
    Render a timestamp as RFC 3339 with nanosecond precision.

    Fractional seconds are trimmed of trailing zeros and omitted when zero.
    UTC renders as ``Z``; naive datetimes are taken to be UTC. A plain
    ``date`` renders as ``YYYY-MM-DD``.
    """
    if not isinstance(value, datetime):
        return value.isoformat()

    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)

    text = (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
        f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
    )

    # pandas.Timestamp and friends carry sub-microsecond digits
    nanosecond = getattr(value, "nanosecond", 0)
    fraction = f"{value.microsecond:06d}{nanosecond:03d}".rstrip("0")
    if fraction:
        text += f".{fraction}"

    offset = value.utcoffset() or timedelta(0)
    if offset == timedelta(0):
        return text + "Z"

    total_minutes = int(offset.total_seconds()) // 60
    sign = "+" if total_minutes >= 0 else "-"
    hours, minutes = divmod(abs(total_minutes), 60)
    return f"{text}{sign}{hours:02d}:{minutes:02d}"


def encode_primitive(
    style: Union[Style, str],
    explode: bool,
    param_name: str,
    value: Any,
) -> str:
    """Style a bare primitive. ``explode`` has no effect on a single value."""

    text = primitive_to_string(value)
    style = Style.parse(style)

    if style is Style.SIMPLE:
        prefix = ""
    elif style is Style.LABEL:
        prefix = "."
    elif style is Style.MATRIX:
        prefix = f";{param_name}="
    elif style is Style.FORM:
        prefix = f"{param_name}="
    else:
        raise UnsupportedStyleError(style)

    return prefix + text
