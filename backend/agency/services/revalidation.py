"""Revalidation — applies cache invalidation for paths, tags and mutation plans.

Invariants:
    - Called only after a successful commit (the caller's ordering)
    - Paths are evicted before tags; both are idempotent
"""

import logging

from agency.core.cache_tags import RevalidationPlan
from agency.infrastructure.render_cache import RenderCache

logger = logging.getLogger(__name__)


def revalidate_path(cache: RenderCache, path: str) -> int:
    return cache.invalidate_path(path)


def revalidate_tag(cache: RenderCache, tag: str) -> int:
    return cache.invalidate_tag(tag)


def apply_plan(cache: RenderCache, plan: RevalidationPlan) -> int:
    """Evict everything the plan names; returns the number of evicted entries."""
    evicted = 0
    for path in sorted(plan.paths):
        evicted += cache.invalidate_path(path)
    for tag in sorted(plan.tags):
        evicted += cache.invalidate_tag(tag)
    logger.debug(
        f"Applied revalidation plan: {len(plan.paths)} paths, "
        f"{len(plan.tags)} tags, {evicted} entries evicted",
    )
    return evicted
