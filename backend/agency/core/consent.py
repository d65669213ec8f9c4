"""Analytics Consent — explicit tri-state consent and the analytics loading rule.

Invariants:
    - Stored value "true" -> GRANTED, "false" -> DENIED, anything else (or absent) -> UNKNOWN
    - The analytics script loads only with a measurement id AND GRANTED consent
    - UNKNOWN never loads analytics (the banner is shown instead)
"""

from enum import Enum

CONSENT_COOKIE = "analytics-consent"
CONSENT_MAX_AGE_SECONDS = 60 * 60 * 24 * 365


class ConsentState(str, Enum):
    GRANTED = "granted"
    DENIED = "denied"
    UNKNOWN = "unknown"


def parse_consent(raw: str | None) -> ConsentState:
    if raw == "true":
        return ConsentState.GRANTED
    if raw == "false":
        return ConsentState.DENIED
    return ConsentState.UNKNOWN


def serialize_consent(granted: bool) -> str:
    return "true" if granted else "false"


def analytics_enabled(measurement_id: str | None, state: ConsentState) -> bool:
    return bool(measurement_id) and state is ConsentState.GRANTED


def should_show_banner(state: ConsentState) -> bool:
    return state is ConsentState.UNKNOWN
