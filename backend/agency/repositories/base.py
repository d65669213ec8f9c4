"""Shared write helper for repositories."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from agency.core.errors import ConflictError

logger = logging.getLogger(__name__)


async def commit_or_conflict(db: AsyncSession, conflict_message: str) -> None:
    """Commit; a uniqueness violation rolls back and becomes ConflictError."""
    try:
        await db.commit()
    except IntegrityError as e:
        await db.rollback()
        logger.warning(f"Unique constraint violated: {e.orig}")
        raise ConflictError(conflict_message)
