"""Sitemap and analytics configuration endpoints."""

import asyncio
from datetime import datetime, timedelta, timezone

from agency.config import get_settings
from agency.core.consent import CONSENT_COOKIE
from tests.helpers import days_ago


async def test_sitemap_lists_published_content(client, make_post, make_project):
    await make_post("live")
    await make_post("draft", published_at=None)
    await make_post("soon", published_at=days_ago(-1))
    await make_project("shop")

    response = await client.get("/sitemap.xml")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/xml")
    assert "<loc>https://ai1.test/blog/live</loc>" in response.text
    assert "/blog/draft" not in response.text
    assert "/blog/soon" not in response.text
    assert "<loc>https://ai1.test/portfolio/shop</loc>" in response.text


async def test_analytics_disabled_without_consent(client, monkeypatch):
    monkeypatch.setattr(get_settings(), "ga_measurement_id", "G-TEST123")

    body = (await client.get("/api/analytics")).json()

    assert body == {
        "enabled": False, "measurement_id": None,
        "consent": "unknown", "show_banner": True,
    }


async def test_granting_consent_enables_analytics(client, monkeypatch):
    monkeypatch.setattr(get_settings(), "ga_measurement_id", "G-TEST123")

    response = await client.post("/api/analytics/consent", json={"granted": True})

    assert response.json()["enabled"] is True
    assert f"{CONSENT_COOKIE}=true" in response.headers["set-cookie"]
    client.cookies.set(CONSENT_COOKIE, "true")
    body = (await client.get("/api/analytics")).json()
    assert body["measurement_id"] == "G-TEST123"
    assert body["show_banner"] is False


async def test_consent_without_measurement_id_stays_disabled(client):
    client.cookies.set(CONSENT_COOKIE, "true")

    body = (await client.get("/api/analytics")).json()

    assert body["enabled"] is False
    assert body["consent"] == "granted"


async def test_cached_sitemap_picks_up_post_once_live(client, make_post):
    await make_post(
        "launch",
        published_at=datetime.now(timezone.utc) + timedelta(seconds=1),
    )
    assert "/blog/launch" not in (await client.get("/sitemap.xml")).text

    await asyncio.sleep(1.5)

    assert "<loc>https://ai1.test/blog/launch</loc>" in (
        await client.get("/sitemap.xml")
    ).text
