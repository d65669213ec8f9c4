"""Dashboard Repository — aggregate counts for the admin home page.

Invariants:
    - published posts: published_at <= now; drafts: everything else
      (no publish date, or scheduled in the future)
    - recent_leads: the 10 newest submissions regardless of status
    - active_subscribers counts ACTIVE rows only; total_subscribers counts all
"""

from dataclasses import dataclass
from datetime import datetime

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from agency.core.domain_types import SubmissionStatus, SubscriberStatus
from agency.models.blog_post import BlogPost
from agency.models.contact_submission import ContactSubmission
from agency.models.newsletter_subscriber import NewsletterSubscriber
from agency.models.project import Project

RECENT_LEADS_LIMIT = 10


@dataclass
class DashboardCounts:
    total_projects: int
    featured_projects: int
    published_posts: int
    draft_posts: int
    pending_leads: int
    total_leads: int
    total_subscribers: int
    active_subscribers: int
    recent_leads: list[ContactSubmission]


async def _count(db: AsyncSession, query) -> int:
    result = await db.execute(query)
    return result.scalar_one()


async def get_dashboard_counts(db: AsyncSession, now: datetime) -> DashboardCounts:
    total_posts = await _count(db, select(func.count(BlogPost.id)))
    published_posts = await _count(
        db,
        select(func.count(BlogPost.id)).where(
            BlogPost.published_at.is_not(None), BlogPost.published_at <= now,
        ),
    )
    recent = await db.execute(
        select(ContactSubmission)
        .order_by(ContactSubmission.created_at.desc())
        .limit(RECENT_LEADS_LIMIT),
    )
    return DashboardCounts(
        total_projects=await _count(db, select(func.count(Project.id))),
        featured_projects=await _count(
            db, select(func.count(Project.id)).where(Project.featured.is_(True)),
        ),
        published_posts=published_posts,
        draft_posts=total_posts - published_posts,
        pending_leads=await _count(
            db,
            select(func.count(ContactSubmission.id)).where(
                ContactSubmission.status == SubmissionStatus.PENDING,
            ),
        ),
        total_leads=await _count(db, select(func.count(ContactSubmission.id))),
        total_subscribers=await _count(
            db, select(func.count(NewsletterSubscriber.id)),
        ),
        active_subscribers=await _count(
            db,
            select(func.count(NewsletterSubscriber.id)).where(
                NewsletterSubscriber.status == SubscriberStatus.ACTIVE,
            ),
        ),
        recent_leads=list(recent.scalars().all()),
    )
