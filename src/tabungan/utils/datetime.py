"""Date-time helpers for timestamp storage and month grouping."""

from datetime import datetime, timezone
from typing import Optional

MONTH_NAMES = (
    "Januari",
    "Februari",
    "Maret",
    "April",
    "Mei",
    "Juni",
    "Juli",
    "Agustus",
    "September",
    "Oktober",
    "November",
    "Desember",
)


def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Convert an aware timestamp to naive UTC; naive values are assumed UTC already."""

    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def month_name(month: int) -> str:
    """Return the Indonesian name of a 1-based month number."""

    return MONTH_NAMES[month - 1]
