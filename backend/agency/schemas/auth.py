"""Auth Schemas — admin login credentials, admin user management and the public admin identity."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from agency.core.domain_types import AdminRole

PASSWORD_MIN_LENGTH = 8


class LoginRequest(BaseModel):
    email: str = Field(min_length=3, max_length=100)
    password: str = Field(min_length=1, max_length=200)


class AdminIdentity(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    email: str
    name: str
    role: AdminRole


class AdminUserOut(AdminIdentity):
    created_at: datetime


class AdminUserCreate(BaseModel):
    email: EmailStr = Field(max_length=100)
    name: str = Field(min_length=1, max_length=100)
    password: str = Field(min_length=PASSWORD_MIN_LENGTH, max_length=200)
    role: AdminRole = AdminRole.EDITOR

    @field_validator("email", mode="before")
    @classmethod
    def lower_email(cls, v):
        return v.strip().lower() if isinstance(v, str) else v

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v):
        return v.strip() if isinstance(v, str) else v


class AdminUserUpdate(BaseModel):
    """Partial update; omitted or null fields stay unchanged."""
    email: EmailStr | None = Field(None, max_length=100)
    name: str | None = Field(None, min_length=1, max_length=100)
    password: str | None = Field(
        None, min_length=PASSWORD_MIN_LENGTH, max_length=200,
    )
    role: AdminRole | None = None

    @field_validator("email", mode="before")
    @classmethod
    def lower_email(cls, v):
        return v.strip().lower() if isinstance(v, str) else v

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v):
        return v.strip() if isinstance(v, str) else v
