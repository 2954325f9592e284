"""
Lipa na M-Pesa password derivation.

Password = Base64(BusinessShortCode + PassKey + Timestamp)

The gateway recomputes the same value, so the concatenation order and the
plain decimal rendering of short code and timestamp must match exactly.
"""

import base64
from datetime import date, datetime
from typing import Callable, Dict

TimestampProvider = Callable[[], int]

_EPOCH = date(1970, 1, 1)


def generate_password(business_short_code: int, pass_key: str, timestamp: int) -> str:
    """Return base64(str(short code) + pass key + str(timestamp))."""
    raw = f"{int(business_short_code)}{pass_key}{int(timestamp)}"
    return base64.b64encode(raw.encode("utf-8")).decode("utf-8")


def epoch_day_timestamp(today: date = None) -> int:
    """Days since 1970-01-01 for the local calendar date."""
    today = today or date.today()
    return (today - _EPOCH).days


def compact_datetime_timestamp(now: datetime = None) -> int:
    """Local time as yyyyMMddHHmmss, rendered as an integer."""
    now = now or datetime.now()
    return int(now.strftime("%Y%m%d%H%M%S"))


TIMESTAMP_PROVIDERS: Dict[str, TimestampProvider] = {
    "epoch_day": epoch_day_timestamp,
    "datetime":  compact_datetime_timestamp,
}


def get_timestamp_provider(name: str) -> TimestampProvider:
    """
    Resolve a timestamp provider by its configured name.

    Raises:
        ValueError: If the name is not registered
    """
    provider = TIMESTAMP_PROVIDERS.get((name or "").lower())
    if provider is None:
        raise ValueError(
            f"Unknown timestamp format '{name}'. Use one of: {', '.join(TIMESTAMP_PROVIDERS)}"
        )
    return provider
