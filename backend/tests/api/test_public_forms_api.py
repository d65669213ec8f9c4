"""Contact and newsletter endpoints — action envelopes over HTTP."""

CONTACT_FORM = {
    "name": "Grace Hopper",
    "email": "grace@example.com",
    "project_type": "CONSULTATION",
    "budget_range": "ABOVE_50K",
    "message": "We would like an architecture review.",
}


async def test_contact_submission_is_201_and_emails_sent(client, outbox):
    response = await client.post("/api/contact", json=CONTACT_FORM)

    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["data"]["status"] == "PENDING"
    assert len(outbox.to("grace@example.com")) == 1


async def test_contact_submission_survives_email_outage(client, outbox):
    outbox.fail_for = {"grace@example.com"}

    response = await client.post("/api/contact", json=CONTACT_FORM)

    assert response.status_code == 201
    assert response.json()["success"] is True


async def test_invalid_contact_form_is_400_with_details(client):
    response = await client.post("/api/contact", json={**CONTACT_FORM, "message": "hi"})

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["code"] == "VALIDATION_ERROR"
    assert "message" in body["details"]["validation_errors"]


async def test_newsletter_duplicate_is_409(client):
    first = await client.post("/api/newsletter", json={"email": "reader@example.com"})
    second = await client.post("/api/newsletter", json={"email": "reader@example.com"})

    assert first.status_code == 201
    assert second.status_code == 409
    assert second.json() == {
        "success": False,
        "error": "This email is already subscribed",
        "code": "CONFLICT",
    }


async def test_newsletter_status_and_unsubscribe(client):
    await client.post("/api/newsletter", json={"email": "reader@example.com"})

    status = await client.get("/api/newsletter/status", params={"email": "reader@example.com"})
    removed = await client.delete("/api/newsletter", params={"email": "reader@example.com"})
    again = await client.delete("/api/newsletter", params={"email": "reader@example.com"})

    assert status.json() == {"success": True, "data": True}
    assert removed.status_code == 200
    assert again.status_code == 404
