"""
Datetime utilities for consistent timezone handling across the application.

All persisted timestamps are timezone-aware and expressed in clinic-local
time (UTC+8, shared by Hong Kong and Taiwan).
"""

import logging
from datetime import datetime, timezone, timedelta
from typing import Optional

logger = logging.getLogger(__name__)

# Clinic timezone constant (UTC+8)
CLINIC_TZ = timezone(timedelta(hours=8))


def clinic_now() -> datetime:
    """
    Get current clinic-local datetime (UTC+8).

    Returns:
        Current datetime with the clinic timezone
    """
    return datetime.now(CLINIC_TZ)


def ensure_clinic_tz(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Ensure a datetime is timezone-aware in the clinic timezone.

    Naive datetimes (SQLite drops tzinfo on read) are assumed to already be
    clinic-local.

    Args:
        dt: Datetime to normalize

    Returns:
        Timezone-aware datetime in the clinic timezone, or None if input is None
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        return dt.replace(tzinfo=CLINIC_TZ)
    return dt.astimezone(CLINIC_TZ)


def to_epoch_millis(dt: datetime) -> int:
    """Convert a datetime to milliseconds since the epoch (browser `Date.now()` units)."""
    aware = ensure_clinic_tz(dt)
    if aware is None:
        raise ValueError("Cannot convert a missing datetime to epoch milliseconds")
    return int(aware.timestamp() * 1000)
