from __future__ import annotations

from datetime import datetime, timezone

from babel import Locale
from babel.dates import format_date as babel_format_date


def parse_date(value: str) -> datetime:
    """Parse an ISO-8601 publication date.

    Naive values are read as UTC so that dated and timestamped posts sort
    against each other. Raises ``ValueError`` on malformed input.
    """
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_date(date: str, locale: str = "en-US") -> str:
    """Format an ISO date as a long, locale-aware calendar date."""
    babel_locale = Locale.parse(locale.replace("_", "-"), sep="-")
    return babel_format_date(parse_date(date).date(), format="long", locale=babel_locale)
