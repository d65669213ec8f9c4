"""Demo Seed — fills an empty database with sample projects, posts, leads and subscribers.

Invariants:
    - Refuses to run against a database that already holds projects
    - Writes go through the repositories (same normalization as the API)

Usage:
    python -m agency.seed            # uses DATABASE_URL
"""

import asyncio
import logging
from datetime import datetime, timezone

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from agency.config import get_settings
from agency.core.blog_text import calculate_reading_time
from agency.core.domain_types import (
    BudgetRange, PostCategory, ProjectCategory, ProjectType, SubmissionStatus,
)
from agency.db.session import create_session_factory
from agency.infrastructure.observability import setup_logging
from agency.repositories import blog as blog_repo
from agency.repositories import contact as contact_repo
from agency.repositories import newsletter as newsletter_repo
from agency.repositories import projects as project_repo

logger = logging.getLogger(__name__)

IMAGE_BASE = "https://images.ai1.com"

PROJECTS = [
    {
        "slug": "ecommerce-platform",
        "title": "Modern E-Commerce Platform",
        "description": (
            "A full-featured e-commerce platform with real-time inventory "
            "management, secure payment processing, and advanced analytics."
        ),
        "category": ProjectCategory.ECOMMERCE,
        "technologies": ["Next.js", "TypeScript", "PostgreSQL", "Stripe"],
        "images": [f"{IMAGE_BASE}/projects/ecommerce-1.jpg"],
        "client": "TechRetail Inc.",
        "results": "Increased conversion rate by 45% and reduced cart abandonment by 30%",
        "featured": True,
    },
    {
        "slug": "fitness-tracking-app",
        "title": "Fitness Tracking Mobile App",
        "description": (
            "Cross-platform mobile application for tracking workouts, nutrition, "
            "and progress with AI-powered recommendations."
        ),
        "category": ProjectCategory.MOBILE_APP,
        "technologies": ["React Native", "Node.js", "TensorFlow", "AWS"],
        "images": [f"{IMAGE_BASE}/projects/fitness-1.jpg"],
        "client": "FitLife",
        "featured": True,
    },
    {
        "slug": "corporate-website-redesign",
        "title": "Corporate Website Redesign",
        "description": "Complete redesign of a corporate website with a headless CMS.",
        "category": ProjectCategory.WEB_DEVELOPMENT,
        "technologies": ["Next.js", "Sanity", "Tailwind CSS"],
        "featured": False,
    },
    {
        "slug": "brand-identity-refresh",
        "title": "Brand Identity Refresh",
        "description": "A modern visual identity across digital and print touchpoints.",
        "category": ProjectCategory.BRANDING,
        "technologies": ["Figma", "Illustrator"],
        "featured": False,
    },
    {
        "slug": "saas-dashboard-design",
        "title": "SaaS Dashboard UI/UX Design",
        "description": "Data-dense analytics dashboard designed for clarity and speed.",
        "category": ProjectCategory.UI_UX_DESIGN,
        "technologies": ["Figma", "React", "D3.js"],
        "featured": True,
    },
]

POSTS = [
    {
        "slug": "getting-started-with-fastapi",
        "title": "Getting Started with FastAPI: A Complete Guide",
        "excerpt": "Build modern async web APIs with FastAPI and SQLAlchemy.",
        "content": (
            "# Getting Started with FastAPI\n\n"
            "## Key Features\n\n- Async first\n- Type-driven validation\n\n"
            "## Getting Started\n\nCreate a virtual environment and install FastAPI.\n"
        ),
        "author": "Jane Developer",
        "categories": [PostCategory.WEB_DEVELOPMENT],
        "tags": ["python", "fastapi"],
        "published_at": datetime(2024, 1, 15, tzinfo=timezone.utc),
        "featured": True,
    },
    {
        "slug": "ai-in-customer-support",
        "title": "How AI Is Changing Customer Support",
        "excerpt": "Where language models help support teams, and where they do not.",
        "content": "## The Shift\n\nSupport teams are adopting assistants.\n\n### Pitfalls\n\nHallucinations.\n",
        "author": "Sam Analyst",
        "categories": [PostCategory.AI, PostCategory.INDUSTRY_INSIGHTS],
        "tags": ["ai", "support"],
        "published_at": datetime(2024, 2, 1, tzinfo=timezone.utc),
    },
    {
        "slug": "technical-seo-checklist",
        "title": "The Technical SEO Checklist",
        "excerpt": "Sitemaps, canonical URLs and Core Web Vitals in one list.",
        "content": "## Crawlability\n\nShip a sitemap.\n\n## Performance\n\nMeasure LCP.\n",
        "author": "Jane Developer",
        "categories": [PostCategory.SEO],
        "tags": ["seo"],
        "published_at": None,
    },
]

LEADS = [
    {
        "name": "Michael Johnson",
        "email": "michael.j@example.com",
        "phone": "+1-555-0123",
        "company": "Startup Innovations",
        "project_type": ProjectType.WEB_DEVELOPMENT,
        "budget_range": BudgetRange.RANGE_10K_25K,
        "message": "We're looking to build a new web platform for our SaaS product.",
    },
    {
        "name": "Emily Chen",
        "email": "emily.chen@example.com",
        "project_type": ProjectType.ECOMMERCE,
        "budget_range": BudgetRange.RANGE_25K_50K,
        "message": "Need help building an e-commerce platform for our fashion brand.",
    },
]

SUBSCRIBERS = [
    ("subscriber1@example.com", "homepage"),
    ("subscriber2@example.com", "blog"),
    ("subscriber3@example.com", "footer"),
]


async def seed(session_factory: async_sessionmaker[AsyncSession]) -> bool:
    """Insert demo content; returns False when the database is not empty."""
    async with session_factory() as db:
        if await project_repo.get_all_projects(db):
            logger.warning("Database already seeded, skipping")
            return False
        for project in PROJECTS:
            await project_repo.create_project(db, project)
        for post in POSTS:
            await blog_repo.create_blog_post(
                db, {**post, "reading_time": calculate_reading_time(post["content"])},
            )
        for lead in LEADS:
            await contact_repo.create_contact_submission(db, lead)
        leads = await contact_repo.get_contact_submissions(db)
        await contact_repo.update_contact_submission(
            db, leads[-1], status=SubmissionStatus.CONTACTED,
        )
        for email, source in SUBSCRIBERS:
            await newsletter_repo.subscribe(db, email, source)
    logger.info(
        f"Seeded {len(PROJECTS)} projects, {len(POSTS)} posts, "
        f"{len(LEADS)} leads, {len(SUBSCRIBERS)} subscribers",
    )
    return True


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, "text")
    asyncio.run(seed(create_session_factory(settings.database_url)))


if __name__ == "__main__":
    main()
