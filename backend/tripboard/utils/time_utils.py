# backend/tripboard/utils/time_utils.py

from datetime import datetime
import pytz


UTC = pytz.utc


def utc_now() -> datetime:
    return datetime.now(UTC)


def utc_now_iso() -> str:
    """
    ISO-8601 with microseconds, e.g. 2025-10-07T10:22:04.123456+00:00.
    Lexicographic order equals chronological order.
    """
    return utc_now().isoformat(timespec="microseconds")
