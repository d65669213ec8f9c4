"""Publication Rule — when a blog post is visible to the public.

Invariants:
    - published  <=>  published_at is not None and published_at <= now
    - Evaluated at call time; there is no persisted "published" flag
    - Naive datetimes are treated as UTC (SQLite drops tzinfo on round-trip)
"""

from datetime import datetime, timezone


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes, convert aware ones."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def is_published(published_at: datetime | None, now: datetime | None = None) -> bool:
    if published_at is None:
        return False
    return as_utc(published_at) <= as_utc(now or utcnow())


def is_scheduled(published_at: datetime | None, now: datetime | None = None) -> bool:
    """Has a publish time that has not arrived yet."""
    return published_at is not None and not is_published(published_at, now)


def seconds_until(moment: datetime | None, now: datetime | None = None) -> float | None:
    """Seconds from now to moment (never negative); None when there is no moment."""
    if moment is None:
        return None
    delta = as_utc(moment) - as_utc(now or utcnow())
    return max(delta.total_seconds(), 0.0)
