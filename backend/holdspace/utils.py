"""
HoldSpace - Clock and Identifier Helpers

All engine timestamps are timezone-aware UTC.
"""
import math
from datetime import datetime, timezone
from typing import Union
from uuid import uuid4

from dateutil import parser as date_parser
from dateutil import tz


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def new_id(prefix: str) -> str:
    """Collision-resistant identifier, e.g. ``sess-3f2a...``."""
    return f"{prefix}-{uuid4().hex}"


def ensure_utc(value: Union[datetime, str]) -> datetime:
    """
    Normalize a persisted timestamp to an aware UTC datetime.

    Accepts datetimes or ISO-8601 strings as stored by the web layer.
    Naive values are taken to be UTC already.
    """
    if isinstance(value, str):
        value = date_parser.isoparse(value)
    if value.tzinfo is None:
        return value.replace(tzinfo=tz.UTC)
    return value.astimezone(tz.UTC)


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positives (Python's round() is banker's)."""
    return int(math.floor(value + 0.5))


def clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))
