"""
paramstyle

Serializes parameter values for generated API clients following the
OpenAPI ``style`` / ``explode`` rules:
- styler: the single entry point, dispatching on value shape
- encoders: primitive, sequence and record encoders
- parameters: ParameterSpec declarations with OpenAPI defaults
- errors: failure taxonomy
"""

from .encoders import encode_primitive, encode_record, encode_sequence, format_timestamp, primitive_to_string
from .errors import (
    AbsentValueError,
    FieldFormatError,
    InvalidDeepObjectUsageError,
    StyleParamError,
    UnsupportedScalarKindError,
    UnsupportedStyleError,
)
from .models import Shape, Style
from .parameters import ParameterSpec
from .styler import classify_shape, style_param

__version__ = "0.1.0"

__all__ = [
    "AbsentValueError",
    "FieldFormatError",
    "InvalidDeepObjectUsageError",
    "ParameterSpec",
    "Shape",
    "Style",
    "StyleParamError",
    "UnsupportedScalarKindError",
    "UnsupportedStyleError",
    "classify_shape",
    "encode_primitive",
    "encode_record",
    "encode_sequence",
    "format_timestamp",
    "primitive_to_string",
    "style_param",
]
