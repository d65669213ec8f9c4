"""ORM Models — SQLAlchemy declarative models for all site entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - No relationships: entities reference each other only by value (slug, email)

Design Decisions:
    - One file per entity
    - All models imported here so Base.metadata is complete before create_all / autogenerate
"""

from agency.models.project import Project  # noqa: F401
from agency.models.blog_post import BlogPost  # noqa: F401
from agency.models.contact_submission import ContactSubmission  # noqa: F401
from agency.models.newsletter_subscriber import NewsletterSubscriber  # noqa: F401
from agency.models.admin_user import AdminUser  # noqa: F401
