"""
Errors raised while styling a parameter value.

Every failure is terminal for the single encode call. Callers building a
request are expected to abort and surface the error to their own caller.
"""

from __future__ import annotations

from typing import Optional, Union


class StyleParamError(ValueError):
    """Base class for all parameter styling failures."""


class AbsentValueError(StyleParamError):
    """The value handed to the styler is absent (None)."""

    def __init__(self, param_name: str):
        super().__init__(f"value for parameter '{param_name}' is absent")
        self.param_name = param_name


class UnsupportedStyleError(StyleParamError):
    """The style is unknown, or not valid for the shape of the value."""

    def __init__(self, style: object):
        super().__init__(f"unsupported style '{style}'")
        self.style = style


class InvalidDeepObjectUsageError(StyleParamError):
    def __init__(self) -> None:
        super().__init__("deepObject parameters must be exploded")


class UnsupportedScalarKindError(StyleParamError, TypeError):
    """A value is not an integer, float, boolean or string."""

    def __init__(self, value: object):
        type_name = type(value).__name__
        super().__init__(f"unsupported type {type_name}")
        self.type_name = type_name


class FieldFormatError(StyleParamError):
    """Formatting one record field or sequence element failed."""

    def __init__(
        self,
        param_name: str,
        error: Exception,
        field: Optional[Union[str, int]] = None,
    ):
        super().__init__(f"error formatting '{param_name}': {error}")
        self.param_name = param_name
        self.field = field
