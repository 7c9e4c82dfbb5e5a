from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
from enum import Enum, IntEnum

import pytest

from paramstyle.encoders import encode_primitive, format_timestamp, primitive_to_string
from paramstyle.errors import UnsupportedScalarKindError, UnsupportedStyleError


class Priority(IntEnum):
    LOW = 1
    HIGH = 3


class Color(str, Enum):
    RED = "red"


def test_integers_format_as_decimal():
    assert primitive_to_string(0) == "0"
    assert primitive_to_string(-42) == "-42"
    assert primitive_to_string(10**20) == "100000000000000000000"


def test_booleans_are_lowercase_literals():
    assert primitive_to_string(True) == "true"
    assert primitive_to_string(False) == "false"


@pytest.mark.parametrize(
    "value, expected",
    [
        (0.5, "0.5"),
        (1.0, "1"),
        (-2.25, "-2.25"),
        (0.1, "0.1"),
        (1e21, "1000000000000000000000"),
        (1.5e-7, "0.00000015"),
        (float("nan"), "NaN"),
        (float("inf"), "+Inf"),
        (float("-inf"), "-Inf"),
    ],
)
def test_floats_use_shortest_fixed_point(value, expected):
    assert primitive_to_string(value) == expected


def test_strings_pass_through_unescaped():
    assert primitive_to_string("a b&c=d") == "a b&c=d"
    assert primitive_to_string("") == ""


def test_enums_format_as_their_value():
    assert primitive_to_string(Priority.HIGH) == "3"
    assert primitive_to_string(Color.RED) == "red"


def test_formatting_is_repeatable():
    for value in (7, 3.25, True, "x"):
        assert primitive_to_string(value) == primitive_to_string(value)


@pytest.mark.parametrize("value", [None, b"raw", Decimal("1.5"), [1], {"a": 1}, object()])
def test_unsupported_kinds_raise(value):
    with pytest.raises(UnsupportedScalarKindError) as exc_info:
        primitive_to_string(value)
    assert str(exc_info.value) == f"unsupported type {type(value).__name__}"


def test_unsupported_kind_is_also_type_error():
    with pytest.raises(TypeError):
        primitive_to_string(None)


@pytest.mark.parametrize(
    "style, expected",
    [
        ("simple", "5"),
        ("label", ".5"),
        ("matrix", ";id=5"),
        ("form", "id=5"),
    ],
)
def test_encode_primitive_prefixes(style, expected):
    assert encode_primitive(style, False, "id", 5) == expected
    assert encode_primitive(style, True, "id", 5) == expected


@pytest.mark.parametrize("style", ["spaceDelimited", "pipeDelimited", "deepObject"])
def test_encode_primitive_rejects_list_only_styles(style):
    with pytest.raises(UnsupportedStyleError):
        encode_primitive(style, True, "id", 5)


def test_encode_primitive_reports_scalar_error_first():
    with pytest.raises(UnsupportedScalarKindError):
        encode_primitive("deepObject", True, "id", None)


def test_timestamp_utc_uses_z_suffix():
    value = datetime(2021, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
    assert format_timestamp(value) == "2021-01-01T12:00:00Z"


def test_timestamp_trims_fraction():
    value = datetime(2021, 1, 1, 12, 0, 0, 500000, tzinfo=timezone.utc)
    assert format_timestamp(value) == "2021-01-01T12:00:00.5Z"
    value = datetime(2021, 1, 1, 12, 0, 0, 123450, tzinfo=timezone.utc)
    assert format_timestamp(value) == "2021-01-01T12:00:00.12345Z"


def test_timestamp_naive_is_utc():
    assert format_timestamp(datetime(2021, 6, 30, 23, 59, 59)) == "2021-06-30T23:59:59Z"


def test_timestamp_keeps_offset():
    ist = timezone(timedelta(hours=5, minutes=30))
    pst = timezone(timedelta(hours=-8))
    assert format_timestamp(datetime(2021, 1, 1, 12, tzinfo=ist)) == "2021-01-01T12:00:00+05:30"
    assert format_timestamp(datetime(2021, 1, 1, 12, tzinfo=pst)) == "2021-01-01T12:00:00-08:00"


def test_date_renders_calendar_day():
    assert format_timestamp(date(2021, 3, 4)) == "2021-03-04"


class NanoDatetime(datetime):
    nanosecond = 7


def test_timestamp_keeps_nanoseconds():
    value = NanoDatetime(2021, 1, 1, 12, 0, 0, 5, tzinfo=timezone.utc)
    assert format_timestamp(value) == "2021-01-01T12:00:00.000005007Z"


def test_str_subclass_formats_as_plain_text():
    class Token(str):
        pass

    assert primitive_to_string(Token("abc")) == "abc"
