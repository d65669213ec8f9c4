"""Shared field types and validators for boundary schemas."""

from typing import Annotated

from pydantic import AfterValidator, Field, HttpUrl, TypeAdapter

SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"

_http_url = TypeAdapter(HttpUrl)


def _check_url(value: str) -> str:
    _http_url.validate_python(value)
    return value


def blank_to_none(value):
    """Form fields submitted empty mean "not provided"."""
    if isinstance(value, str) and not value.strip():
        return None
    return value


Slug = Annotated[str, Field(min_length=1, max_length=100, pattern=SLUG_PATTERN)]
UrlStr = Annotated[str, AfterValidator(_check_url)]
