"""Analytics Consent — verifies tri-state parsing and the loading rule."""

from agency.core.consent import (
    ConsentState, analytics_enabled, parse_consent, serialize_consent,
    should_show_banner,
)


def test_parse_consent_values():
    assert parse_consent("true") is ConsentState.GRANTED
    assert parse_consent("false") is ConsentState.DENIED
    assert parse_consent(None) is ConsentState.UNKNOWN
    assert parse_consent("yes") is ConsentState.UNKNOWN


def test_serialize_round_trips_through_parse():
    assert parse_consent(serialize_consent(True)) is ConsentState.GRANTED
    assert parse_consent(serialize_consent(False)) is ConsentState.DENIED


def test_analytics_requires_measurement_id_and_grant():
    assert analytics_enabled("G-123", ConsentState.GRANTED)
    assert not analytics_enabled(None, ConsentState.GRANTED)
    assert not analytics_enabled("G-123", ConsentState.DENIED)
    assert not analytics_enabled("G-123", ConsentState.UNKNOWN)


def test_banner_only_while_unknown():
    assert should_show_banner(ConsentState.UNKNOWN)
    assert not should_show_banner(ConsentState.GRANTED)
    assert not should_show_banner(ConsentState.DENIED)
