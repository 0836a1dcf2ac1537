"""Pydantic schemas for bookmark endpoints."""
import json
from typing import Any

from pydantic import BaseModel, ConfigDict

BODY_NOT_OBJECT = "Request body must be a JSON object."


class BookmarkCreate(BaseModel):
    """
    Schema for creating a new bookmark.

    Fields are deliberately untyped: type and range checks happen in
    ``schemas.validators.validate_bookmark_fields`` so that a client gets the
    message of the first rule it broke (as a 400) instead of a 422 listing every
    field-level error.
    """

    model_config = ConfigDict(extra="ignore")

    title: Any = None
    url: Any = None
    desc: Any = None
    rating: Any = None


def parse_bookmark_create(body: bytes) -> BookmarkCreate:
    """
    Parse a raw request body into a BookmarkCreate.

    An empty body counts as an empty object, so the field rules report what is
    missing.

    Raises:
        ValueError: If the body is not valid JSON or not a JSON object.
    """
    if not body.strip():
        return BookmarkCreate()
    try:
        payload = json.loads(body)
    except ValueError:
        raise ValueError(BODY_NOT_OBJECT) from None
    if not isinstance(payload, dict):
        raise ValueError(BODY_NOT_OBJECT)
    return BookmarkCreate.model_validate(payload)


class BookmarkResponse(BaseModel):
    """Schema for bookmark responses."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    url: str
    desc: str
    rating: int
