"""Sitemap — static marketing routes plus published posts and projects.

Invariants:
    - Every URL is rooted at the configured site base URL
    - Only published posts appear (caller passes published posts only)
    - Static routes come first, then blog posts, then projects
"""

from dataclasses import dataclass
from datetime import datetime
from xml.etree import ElementTree as ET

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"

# (path, changefreq, priority)
STATIC_ROUTES: tuple[tuple[str, str, float], ...] = (
    ("", "daily", 1.0),
    ("/about", "monthly", 0.8),
    ("/services", "monthly", 0.9),
    ("/services/web-app-development", "monthly", 0.8),
    ("/services/ai-solutions", "monthly", 0.8),
    ("/services/seo-services", "monthly", 0.8),
    ("/services/branding-uiux", "monthly", 0.8),
    ("/services/game-development", "monthly", 0.8),
    ("/portfolio", "weekly", 0.9),
    ("/blog", "daily", 0.9),
    ("/contact", "monthly", 0.7),
)


@dataclass(frozen=True)
class SitemapEntry:
    url: str
    last_modified: datetime
    change_frequency: str
    priority: float


def build_sitemap(
    base_url: str,
    now: datetime,
    posts: list[tuple[str, datetime | None]],
    projects: list[tuple[str, datetime | None]],
) -> list[SitemapEntry]:
    """posts/projects are (slug, last_modified) pairs."""
    base = base_url.rstrip("/")
    entries = [
        SitemapEntry(f"{base}{path}", now, freq, priority)
        for path, freq, priority in STATIC_ROUTES
    ]
    entries += [
        SitemapEntry(f"{base}/blog/{slug}", modified or now, "monthly", 0.7)
        for slug, modified in posts
    ]
    entries += [
        SitemapEntry(f"{base}/portfolio/{slug}", modified or now, "monthly", 0.7)
        for slug, modified in projects
    ]
    return entries


def render_sitemap_xml(entries: list[SitemapEntry]) -> str:
    urlset = ET.Element("urlset", xmlns=SITEMAP_NS)
    for entry in entries:
        url = ET.SubElement(urlset, "url")
        ET.SubElement(url, "loc").text = entry.url
        ET.SubElement(url, "lastmod").text = entry.last_modified.isoformat()
        ET.SubElement(url, "changefreq").text = entry.change_frequency
        ET.SubElement(url, "priority").text = f"{entry.priority:.1f}"
    body = ET.tostring(urlset, encoding="unicode")
    return '<?xml version="1.0" encoding="UTF-8"?>\n' + body
