import pytest
from pydantic import ValidationError

from paramstyle import InvalidDeepObjectUsageError, ParameterSpec, Style


@pytest.mark.parametrize(
    "location, style, explode",
    [
        ("path", Style.SIMPLE, False),
        ("header", Style.SIMPLE, False),
        ("query", Style.FORM, True),
        ("cookie", Style.FORM, True),
    ],
)
def test_location_defaults(location, style, explode):
    spec = ParameterSpec(name="p", location=location)
    assert spec.style is style
    assert spec.explode is explode


def test_default_location_is_query():
    spec = ParameterSpec(name="p")
    assert spec.location == "query"
    assert spec.encode([1, 2]) == "p=1&p=2"


def test_accepts_openapi_in_key():
    spec = ParameterSpec.model_validate({"name": "id", "in": "path", "style": "label"})
    assert spec.location == "path"
    assert spec.style is Style.LABEL
    assert spec.explode is False
    assert spec.encode([3, 4, 5]) == ".3,4,5"


def test_explicit_explode_wins():
    spec = ParameterSpec(name="id", location="path", style="matrix", explode=True)
    assert spec.encode([3, 4, 5]) == ";id=3;id=4;id=5"


def test_non_form_style_defaults_to_no_explode():
    spec = ParameterSpec(name="ids", style="pipeDelimited")
    assert spec.explode is False
    assert spec.encode([1, 2]) == "ids=1|2"


def test_deep_object_declaration():
    spec = ParameterSpec(name="color", style="deepObject", explode=True)
    assert spec.encode({"R": 100, "G": 200}) == "color[G]=200&color[R]=100"


def test_deep_object_without_explode_fails_on_encode():
    spec = ParameterSpec(name="color", style="deepObject")
    with pytest.raises(InvalidDeepObjectUsageError):
        spec.encode({"R": 100})


@pytest.mark.parametrize(
    "location, style",
    [
        ("query", "label"),
        ("query", "matrix"),
        ("path", "form"),
        ("path", "deepObject"),
        ("header", "form"),
        ("cookie", "simple"),
    ],
)
def test_style_not_allowed_in_location(location, style):
    with pytest.raises(ValidationError):
        ParameterSpec(name="p", location=location, style=style)


def test_unknown_style_rejected():
    with pytest.raises(ValidationError):
        ParameterSpec(name="p", style="tabDelimited")


def test_unknown_location_rejected():
    with pytest.raises(ValidationError):
        ParameterSpec(name="p", location="body")


def test_empty_name_rejected():
    with pytest.raises(ValidationError):
        ParameterSpec(name="")


def test_spec_is_frozen():
    spec = ParameterSpec(name="p")
    with pytest.raises(ValidationError):
        spec.name = "q"
