import time
from datetime import datetime, timezone


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def epoch_millis() -> int:
    # Same granularity as a JavaScript Date.now() timestamp.
    return time.time_ns() // 1_000_000
