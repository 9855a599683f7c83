"""DTOs for the backend details API.

The backend answers ``GET /details/{product|business}/{id}`` with
``{"data": {...}}``. Only the fields used for page metadata are declared;
anything else is ignored.
"""

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator


class DetailsEnvelope(BaseModel):
    """Top-level response wrapper."""

    model_config = ConfigDict(extra="ignore")

    data: dict[str, Any]


class ImageItem(BaseModel):
    model_config = ConfigDict(extra="ignore")

    url: str | None = None


_image_list = TypeAdapter(list[ImageItem])


class ProductDetails(BaseModel):
    """Product (and event) details.

    ``images`` arrives as a string holding a JSON array of ``{url}`` objects.
    An already decoded list is accepted too; anything unparseable becomes an
    empty list.
    """

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    name: str | None = None
    description: str | None = None
    images: list[ImageItem] = Field(default_factory=list)

    @field_validator("images", mode="before")
    @classmethod
    def _decode_images(cls, value: Any) -> list[Any]:
        if not value:
            return []
        if isinstance(value, str):
            try:
                value = json.loads(value)
            except ValueError:
                return []
        try:
            return _image_list.validate_python(value)
        except ValidationError:
            return []

    @property
    def first_image_url(self) -> str:
        if self.images and self.images[0].url:
            return self.images[0].url
        return ""


class BusinessDetails(BaseModel):
    """Business (shop) details."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    business_name: str | None = None
    description: str | None = None
    logo: str | None = None
    photo_url: str | None = None

    @property
    def image_url(self) -> str:
        return self.logo or self.photo_url or ""
