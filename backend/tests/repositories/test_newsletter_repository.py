"""Newsletter and contact repositories — uniqueness and lead review."""

import pytest

from agency.core.domain_types import (
    BudgetRange, ProjectType, SubmissionStatus, SubscriberStatus,
)
from agency.core.errors import ConflictError
from agency.repositories import contact as contact_repo
from agency.repositories import newsletter as newsletter_repo


async def test_subscribe_stores_lowercased_email(test_db):
    await newsletter_repo.subscribe(test_db, "Reader@Example.com", source="footer")

    assert await newsletter_repo.is_email_subscribed(test_db, "reader@example.COM")
    assert await newsletter_repo.count_subscribers(test_db) == 1


async def test_second_subscription_conflicts(test_db):
    await newsletter_repo.subscribe(test_db, "reader@example.com")

    with pytest.raises(ConflictError) as exc:
        await newsletter_repo.subscribe(test_db, "READER@example.com")
    assert exc.value.message == "This email is already subscribed"
    assert await newsletter_repo.count_subscribers(test_db) == 1


async def test_unsubscribe_removes_row(test_db):
    subscriber = await newsletter_repo.subscribe(test_db, "reader@example.com")

    await newsletter_repo.delete_subscriber(test_db, subscriber)

    assert not await newsletter_repo.is_email_subscribed(test_db, "reader@example.com")


async def test_unsubscribed_row_is_kept_but_not_subscribed(test_db):
    subscriber = await newsletter_repo.subscribe(test_db, "reader@example.com")
    assert subscriber.status is SubscriberStatus.ACTIVE
    await newsletter_repo.subscribe(test_db, "other@example.com")

    await newsletter_repo.update_subscriber_status(
        test_db, subscriber, SubscriberStatus.UNSUBSCRIBED,
    )

    assert not await newsletter_repo.is_email_subscribed(test_db, "reader@example.com")
    assert await newsletter_repo.count_subscribers(test_db) == 2
    assert await newsletter_repo.count_subscribers(
        test_db, SubscriberStatus.ACTIVE,
    ) == 1
    unsubscribed = await newsletter_repo.list_subscribers(
        test_db, SubscriberStatus.UNSUBSCRIBED,
    )
    assert [s.email for s in unsubscribed] == ["reader@example.com"]
    with pytest.raises(ConflictError):
        await newsletter_repo.subscribe(test_db, "reader@example.com")


async def test_new_lead_is_pending_and_status_filter_works(test_db):
    lead = await contact_repo.create_contact_submission(test_db, {
        "name": "Ada", "email": "ada@example.com",
        "project_type": ProjectType.MOBILE_APP,
        "budget_range": BudgetRange.UNDER_5K,
        "message": "Please build us an app.",
    })
    assert lead.status is SubmissionStatus.PENDING

    await contact_repo.update_contact_submission(
        test_db, lead, status=SubmissionStatus.CONTACTED, notes="Emailed",
    )

    pending = await contact_repo.get_contact_submissions(test_db, SubmissionStatus.PENDING)
    contacted = await contact_repo.get_contact_submissions(test_db, SubmissionStatus.CONTACTED)
    assert pending == []
    assert [s.notes for s in contacted] == ["Emailed"]
