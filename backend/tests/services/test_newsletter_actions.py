"""Newsletter actions — subscribe once, check, unsubscribe."""

from agency.core.action_result import ActionFailure, ActionSuccess, FailureCode
from agency.services.newsletter_actions import (
    check_email_subscription, subscribe_to_newsletter, unsubscribe_from_newsletter,
)


async def test_duplicate_subscription_is_a_conflict(test_db):
    first = await subscribe_to_newsletter(test_db, {"email": "reader@example.com"})
    second = await subscribe_to_newsletter(test_db, {"email": "Reader@Example.com"})

    assert isinstance(first, ActionSuccess)
    assert isinstance(second, ActionFailure)
    assert second.code is FailureCode.CONFLICT
    assert second.error == "This email is already subscribed"


async def test_status_and_unsubscribe(test_db):
    await subscribe_to_newsletter(test_db, {"email": "reader@example.com", "source": "blog"})

    assert await check_email_subscription(test_db, "READER@example.com") == ActionSuccess(True)
    assert isinstance(await unsubscribe_from_newsletter(test_db, "reader@example.com"), ActionSuccess)
    assert await check_email_subscription(test_db, "reader@example.com") == ActionSuccess(False)


async def test_unsubscribe_unknown_email_is_not_found(test_db):
    result = await unsubscribe_from_newsletter(test_db, "nobody@example.com")

    assert result.code is FailureCode.NOT_FOUND


async def test_invalid_email_is_a_validation_error(test_db):
    result = await subscribe_to_newsletter(test_db, {"email": "not-an-email"})

    assert result.code is FailureCode.VALIDATION_ERROR
