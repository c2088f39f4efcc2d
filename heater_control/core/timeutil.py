from datetime import datetime, timezone


def now_utc() -> datetime:
    return datetime.now(timezone.utc)


def age_seconds(since: float, now: float) -> int:
    """Whole seconds between two monotonic readings, never negative."""
    return max(0, int(now - since))
