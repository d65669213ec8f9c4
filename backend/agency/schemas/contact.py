"""Contact Schemas — the public contact form and admin lead review.

Invariants:
    - message: 10-5000 chars; email must look like a deliverable address
    - phone (optional): digits, spaces and + - ( ) only, <= 20 chars
    - LeadUpdate requires at least one of status / notes
"""

from datetime import datetime
from uuid import UUID

from pydantic import (
    BaseModel, ConfigDict, EmailStr, Field, field_validator, model_validator,
)

from agency.core.domain_types import BudgetRange, ProjectType, SubmissionStatus
from agency.schemas.common import blank_to_none


class ContactSubmissionCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1, max_length=100)
    email: EmailStr = Field(max_length=100)
    phone: str | None = Field(None, max_length=20, pattern=r"^[\d\s\-\+\(\)]+$")
    company: str | None = Field(None, max_length=200)
    project_type: ProjectType
    budget_range: BudgetRange
    message: str = Field(min_length=10, max_length=5000)

    @field_validator("phone", "company", mode="before")
    @classmethod
    def blank_optional(cls, v):
        return blank_to_none(v)


class ContactSubmissionOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    email: str
    phone: str | None
    company: str | None
    project_type: ProjectType
    budget_range: BudgetRange
    message: str
    status: SubmissionStatus
    notes: str | None
    created_at: datetime


class LeadUpdate(BaseModel):
    status: SubmissionStatus | None = None
    notes: str | None = Field(None, max_length=5000)

    @model_validator(mode="after")
    def require_a_change(self):
        if self.status is None and self.notes is None:
            raise ValueError("status or notes is required")
        return self
