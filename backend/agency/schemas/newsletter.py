"""Newsletter Schemas — subscription form input, subscriber output and admin status change."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from agency.core.domain_types import SubscriberStatus
from agency.schemas.common import blank_to_none


class NewsletterSubscribe(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    email: EmailStr = Field(max_length=100)
    source: str | None = Field(None, max_length=100)

    @field_validator("email")
    @classmethod
    def lower_email(cls, v: str) -> str:
        return v.lower()

    @field_validator("source", mode="before")
    @classmethod
    def blank_source(cls, v):
        return blank_to_none(v)


class SubscriberOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    email: str
    source: str | None
    status: SubscriberStatus
    created_at: datetime


class SubscriberStatusUpdate(BaseModel):
    status: SubscriberStatus
