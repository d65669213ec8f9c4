"""Domain Types — closed enumerations shared by models, schemas and actions.

Invariants:
    - Every enumerated column value is a member of one of these Enums
    - Values are the stored/serialized strings — no raw string matching elsewhere

Design Decisions:
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

SubmissionId = NewType("SubmissionId", UUID)
Slug = NewType("Slug", str)


# ─── Enums ───────────────────────────────────────────────────────

class ProjectCategory(str, Enum):
    """Portfolio grouping for projects."""
    WEB_DEVELOPMENT = "WEB_DEVELOPMENT"
    MOBILE_APP = "MOBILE_APP"
    ECOMMERCE = "ECOMMERCE"
    BRANDING = "BRANDING"
    UI_UX_DESIGN = "UI_UX_DESIGN"
    OTHER = "OTHER"


class PostCategory(str, Enum):
    """Blog categories — a post carries one or more."""
    WEB_DEVELOPMENT = "WEB_DEVELOPMENT"
    AI = "AI"
    GAME_DEV = "GAME_DEV"
    SEO = "SEO"
    INDUSTRY_INSIGHTS = "INDUSTRY_INSIGHTS"
    OTHER = "OTHER"


class ProjectType(str, Enum):
    """What a contact-form lead wants built."""
    WEB_DEVELOPMENT = "WEB_DEVELOPMENT"
    MOBILE_APP = "MOBILE_APP"
    ECOMMERCE = "ECOMMERCE"
    BRANDING = "BRANDING"
    CONSULTATION = "CONSULTATION"
    OTHER = "OTHER"


class BudgetRange(str, Enum):
    UNDER_5K = "UNDER_5K"
    RANGE_5K_10K = "RANGE_5K_10K"
    RANGE_10K_25K = "RANGE_10K_25K"
    RANGE_25K_50K = "RANGE_25K_50K"
    ABOVE_50K = "ABOVE_50K"


class SubmissionStatus(str, Enum):
    """Lead review lifecycle: PENDING -> CONTACTED/IN_PROGRESS -> COMPLETED | ARCHIVED."""
    PENDING = "PENDING"
    CONTACTED = "CONTACTED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    ARCHIVED = "ARCHIVED"


class SubscriberStatus(str, Enum):
    """ACTIVE subscribers receive the newsletter; UNSUBSCRIBED rows are kept for the record."""
    ACTIVE = "ACTIVE"
    UNSUBSCRIBED = "UNSUBSCRIBED"


class AdminRole(str, Enum):
    SUPER_ADMIN = "SUPER_ADMIN"
    ADMIN = "ADMIN"
    EDITOR = "EDITOR"


# ─── Display labels ──────────────────────────────────────────────

BUDGET_RANGE_LABELS: dict[BudgetRange, str] = {
    BudgetRange.UNDER_5K: "Under $5,000",
    BudgetRange.RANGE_5K_10K: "$5,000 - $10,000",
    BudgetRange.RANGE_10K_25K: "$10,000 - $25,000",
    BudgetRange.RANGE_25K_50K: "$25,000 - $50,000",
    BudgetRange.ABOVE_50K: "Above $50,000",
}

PROJECT_TYPE_LABELS: dict[ProjectType, str] = {
    ProjectType.WEB_DEVELOPMENT: "Web Development",
    ProjectType.MOBILE_APP: "Mobile App",
    ProjectType.ECOMMERCE: "E-commerce",
    ProjectType.BRANDING: "Branding",
    ProjectType.CONSULTATION: "Consultation",
    ProjectType.OTHER: "Other",
}

POST_CATEGORY_LABELS: dict[PostCategory, str] = {
    PostCategory.WEB_DEVELOPMENT: "Web Development",
    PostCategory.AI: "AI",
    PostCategory.GAME_DEV: "Game Dev",
    PostCategory.SEO: "SEO",
    PostCategory.INDUSTRY_INSIGHTS: "Industry Insights",
    PostCategory.OTHER: "Other",
}
