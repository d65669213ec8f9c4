"""Render Cache — in-process store of rendered page payloads, evicted by path or tag.

Invariants:
    - Entries keyed by (path, query); invalidate_path evicts every query variant
    - Each entry carries the tags it was rendered under; invalidate_tag evicts
      every entry carrying that tag
    - An entry older than ttl_seconds, or past its own max_age, is treated as
      absent (None = no expiry)
    - Never more than max_entries entries: set() sweeps expired entries, then
      evicts the oldest until the new one fits
    - Only successful renders are stored: a render that raises caches nothing,
      a render returned with store=False is served once and not kept

Design Decisions:
    - Plain dict + linear scan on invalidation: the key space is a handful of
      public pages, invalidation is rare compared to reads
    - Per-entry max_age lets a page expire exactly when content it depends on
      (a scheduled post) becomes visible
    - Module singleton initialized on startup, exposed through a FastAPI
      dependency so tests can swap it
"""

import logging
import time
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Iterable, NamedTuple

logger = logging.getLogger(__name__)

DEFAULT_MAX_ENTRIES = 512


class Rendered(NamedTuple):
    """What a renderer hands back; a plain (value, tags) tuple also works."""
    value: Any
    tags: Iterable[str] = ()
    max_age: float | None = None
    store: bool = True


Renderer = Callable[[], Awaitable[Rendered | tuple[Any, Iterable[str]]]]


@dataclass(frozen=True)
class CacheEntry:
    value: Any
    tags: frozenset[str]
    created_at: float
    expires_at: float | None = None


def _normalize_path(path: str) -> str:
    if path != "/" and path.endswith("/"):
        return path.rstrip("/")
    return path


class RenderCache:
    """Path+query keyed cache with tag-based invalidation."""

    def __init__(
        self,
        ttl_seconds: int | None = None,
        clock: Callable[[], float] = time.monotonic,
        max_entries: int = DEFAULT_MAX_ENTRIES,
    ):
        self.ttl_seconds = ttl_seconds
        self.max_entries = max_entries
        self._clock = clock
        self._entries: dict[tuple[str, str], CacheEntry] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def _expired(self, entry: CacheEntry, now: float) -> bool:
        if entry.expires_at is not None and now >= entry.expires_at:
            return True
        if self.ttl_seconds is None:
            return False
        return now - entry.created_at >= self.ttl_seconds

    def get(self, path: str, query: str = "") -> Any | None:
        key = (_normalize_path(path), query)
        entry = self._entries.get(key)
        if entry is None:
            return None
        if self._expired(entry, self._clock()):
            del self._entries[key]
            return None
        return entry.value

    def set(
        self,
        path: str,
        value: Any,
        tags: Iterable[str] = (),
        query: str = "",
        max_age: float | None = None,
    ) -> None:
        key = (_normalize_path(path), query)
        now = self._clock()
        self._entries.pop(key, None)
        self._sweep(now)
        while self._entries and len(self._entries) >= self.max_entries:
            oldest = min(self._entries, key=lambda k: self._entries[k].created_at)
            del self._entries[oldest]
        expires_at = now + max_age if max_age is not None else None
        self._entries[key] = CacheEntry(value, frozenset(tags), now, expires_at)

    def _sweep(self, now: float) -> None:
        expired = [k for k, e in self._entries.items() if self._expired(e, now)]
        for key in expired:
            del self._entries[key]

    async def get_or_render(
        self, path: str, render: Renderer, query: str = "",
    ) -> Any:
        """Return the cached payload, or await render() and store its result."""
        cached = self.get(path, query)
        if cached is not None:
            return cached
        rendered = Rendered(*await render())
        if rendered.store:
            self.set(path, rendered.value, rendered.tags, query, rendered.max_age)
        return rendered.value

    def invalidate_path(self, path: str) -> int:
        target = _normalize_path(path)
        keys = [key for key in self._entries if key[0] == target]
        for key in keys:
            del self._entries[key]
        logger.info(
            f"Revalidated path {target} ({len(keys)} entries)",
            extra={"path": target},
        )
        return len(keys)

    def invalidate_tag(self, tag: str) -> int:
        keys = [key for key, entry in self._entries.items() if tag in entry.tags]
        for key in keys:
            del self._entries[key]
        logger.info(
            f"Revalidated tag {tag} ({len(keys)} entries)", extra={"tag": tag},
        )
        return len(keys)

    def clear(self) -> None:
        self._entries.clear()


# Singleton (initialized on startup)
render_cache = RenderCache()


def init_render_cache(
    ttl_seconds: int | None = None, max_entries: int = DEFAULT_MAX_ENTRIES,
) -> RenderCache:
    global render_cache
    render_cache = RenderCache(ttl_seconds, max_entries=max_entries)
    return render_cache


def get_render_cache() -> RenderCache:
    """FastAPI dependency for the process-wide render cache."""
    return render_cache
