"""Revalidation Schemas — body of the external revalidation webhook."""

from pydantic import BaseModel, Field


class RevalidateRequest(BaseModel):
    path: str | None = Field(None, max_length=500)
    tag: str | None = Field(None, max_length=200)
    secret: str | None = None
