"""
Parameter declarations for generated API clients.

A ParameterSpec mirrors the style-related part of an OpenAPI parameter
object. Missing style/explode take the OpenAPI defaults for the location.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .models import ALLOWED_STYLES, DEFAULT_STYLES, ParameterLocation, Style
from .styler import style_param


class ParameterSpec(BaseModel):
    """
    How one parameter is serialized.

    Examples:
        {"name": "id", "location": "path"}
        {"name": "filter", "location": "query", "style": "deepObject", "explode": true}
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(..., min_length=1, description="Parameter name as it appears on the wire")
    location: ParameterLocation = Field("query", alias="in", description="Where the parameter is sent")
    style: Optional[Style] = None
    explode: Optional[bool] = None

    @model_validator(mode="before")
    @classmethod
    def _apply_location_defaults(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        data = dict(data)
        location = data.get("in", data.get("location", "query"))
        if location not in DEFAULT_STYLES:
            # leave it to the Literal check
            return data

        default_style, default_explode = DEFAULT_STYLES[location]
        if data.get("style") is None:
            data["style"] = default_style
            if data.get("explode") is None:
                data["explode"] = default_explode
        elif data.get("explode") is None:
            # OpenAPI: explode defaults to true only for form
            data["explode"] = data["style"] == Style.FORM
        return data

    @model_validator(mode="after")
    def _check_style_location(self) -> "ParameterSpec":
        if self.style not in ALLOWED_STYLES[self.location]:
            raise ValueError(
                f"style '{self.style}' is not allowed for {self.location} parameters"
            )
        return self

    def encode(self, value: Any) -> str:
        """Style ``value`` according to this declaration."""
        return style_param(self.style, bool(self.explode), self.name, value)
