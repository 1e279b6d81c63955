"""
Request payload schemas.

Pydantic models describe the *shape* of incoming JSON (camelCase on the
wire); business rules with their user-facing messages live in
``blogapp.utils.validators``.
"""
from typing import List, Optional

import pydantic
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from blogapp.errors import ValidationError
from blogapp.models.blog import MediaType

# relational ids are 32-bit signed integers
MAX_ID = 2**31 - 1


class RequestModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RegisterRequest(RequestModel):
    username: str = ""
    email: str = ""
    password: str = ""
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class LoginRequest(RequestModel):
    email: str = ""
    password: str = ""


class MediaItemDto(RequestModel):
    url: str
    type: MediaType
    caption: Optional[str] = None
    order: int = 0


class BlogPayload(RequestModel):
    """Body of both create and update; update ignores ``category_id``."""

    category_id: Optional[int] = Field(None, ge=1, le=MAX_ID)
    title: str = ""
    content: str = ""
    summary: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    media_items: List[MediaItemDto] = Field(default_factory=list)
    is_published: bool = False


class CreateCategoryRequest(RequestModel):
    name: str = ""
    description: Optional[str] = None


class UpdateCategoryRequest(RequestModel):
    name: str = ""
    description: Optional[str] = None
    is_active: Optional[bool] = None


class UpdateProfileRequest(RequestModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None


def parse_payload(model, data):
    """Build ``model`` from JSON data, turning every shape problem into one ValidationError."""
    try:
        return model.model_validate(data or {})
    except pydantic.ValidationError as e:
        errors = []
        for err in e.errors():
            location = ".".join(str(part) for part in err["loc"])
            errors.append(f"{location}: {err['msg']}" if location else err["msg"])
        raise ValidationError(errors) from e
