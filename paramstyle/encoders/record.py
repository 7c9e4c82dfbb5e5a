"""
Record styling: flat objects whose fields are primitives.

Records may be pydantic models, dataclass instances or plain mappings. Each
field is emitted under its wire name, which for models and dataclasses is
declared on the class:

- pydantic: ``Field(serialization_alias=...)`` or ``Field(alias=...)``
- dataclasses: ``field(metadata={"alias": ...})``

Field order in the output is always the sorted order of wire names, never
declaration or insertion order.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from datetime import date
from functools import lru_cache
from typing import Any, Iterator, Union

from pydantic import BaseModel

from ..errors import (
    FieldFormatError,
    InvalidDeepObjectUsageError,
    UnsupportedScalarKindError,
    UnsupportedStyleError,
)
from ..models import Style
from .primitive import format_timestamp, primitive_to_string

# dataclass field metadata key holding the wire name
WIRE_NAME_KEY = "alias"


def is_record(value: Any) -> bool:
    """True for values the record encoder accepts, timestamps included."""

    if isinstance(value, (BaseModel, Mapping, date)):
        return True
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


@lru_cache(maxsize=256)
def wire_names(record_type: type) -> tuple[tuple[str, str], ...]:
    """
    Map each declared attribute of ``record_type`` to its wire name.

    Cached per class.

    Returns:
        Tuple of ``(attribute_name, wire_name)`` pairs in declaration order.
    """
    if issubclass(record_type, BaseModel):
        return tuple(
            (name, info.serialization_alias or info.alias or name)
            for name, info in record_type.model_fields.items()
        )

    if dataclasses.is_dataclass(record_type):
        return tuple(
            (field.name, field.metadata.get(WIRE_NAME_KEY) or field.name)
            for field in dataclasses.fields(record_type)
        )

    raise TypeError(f"{record_type.__name__} does not declare record fields")


def record_fields(value: Any) -> Iterator[tuple[Any, Any]]:
    """
    Yield ``(wire_name, field_value)`` for every field, absent ones included.

    Mapping keys are yielded as-is; they must be strings and are the wire names.
    """
    if isinstance(value, Mapping):
        yield from value.items()
        return

    for attribute, wire_name in wire_names(type(value)):
        yield wire_name, getattr(value, attribute)


def _format_fields(param_name: str, value: Any) -> dict[str, str]:
    formatted: dict[str, str] = {}
    for wire_name, item in record_fields(value):
        # unset optional fields are dropped, not encoded as empty
        if item is None:
            continue
        try:
            if not isinstance(wire_name, str):
                raise UnsupportedScalarKindError(wire_name)
            formatted_item = primitive_to_string(item)
        except UnsupportedScalarKindError as e:
            raise FieldFormatError(param_name, e, field=wire_name) from e
        if wire_name in formatted:
            raise FieldFormatError(
                param_name, ValueError(f"duplicate field '{wire_name}'"), field=wire_name
            )
        formatted[wire_name] = formatted_item
    return formatted


def encode_record(
    style: Union[Style, str],
    explode: bool,
    param_name: str,
    value: Any,
) -> str:
    """
    Style a flat record of primitives.

    A timestamp (``datetime`` or ``date``) bypasses field expansion and is
    rendered as RFC 3339 whatever the requested style and explode flag.

    Args:
        style: Serialization style
        explode: Whether fields are emitted as ``key=value`` pairs
        param_name: Parameter name, used verbatim in prefixes and keys
        value: Record to encode

    Returns:
        The styled record, not percent-encoded

    Raises:
        UnsupportedStyleError: For ``spaceDelimited``, ``pipeDelimited`` or
            an unknown style.
        InvalidDeepObjectUsageError: For ``deepObject`` without explode.
        FieldFormatError: If a present field is not a primitive.
    """
    style = Style.parse(style)

    if isinstance(value, date):
        return format_timestamp(value)

    fields = _format_fields(param_name, value)
    keys = sorted(fields)

    if style is Style.DEEP_OBJECT:
        if not explode:
            raise InvalidDeepObjectUsageError()
        return "&".join(f"{param_name}[{key}]={fields[key]}" for key in keys)

    if explode:
        parts = [f"{key}={fields[key]}" for key in keys]
    else:
        parts = [token for key in keys for token in (key, fields[key])]

    if style is Style.SIMPLE:
        prefix, separator = "", ","
    elif style is Style.LABEL:
        prefix, separator = ".", "." if explode else ","
    elif style is Style.MATRIX:
        if explode:
            prefix, separator = ";", ";"
        else:
            prefix, separator = f";{param_name}=", ","
    elif style is Style.FORM:
        if explode:
            prefix, separator = "", "&"
        else:
            prefix, separator = f"{param_name}=", ","
    else:
        raise UnsupportedStyleError(style)

    return prefix + separator.join(parts)
