"""Health Status — liveness envelope with live process uptime.

Invariants:
    - status is always "ok"; no failure path
    - uptime read on every call (never cached), seconds as float, >= 0
"""

import time
from datetime import datetime, timezone

import psutil


def process_uptime() -> float:
    """Seconds since this process was started, per the OS process table."""
    started_at = psutil.Process().create_time()
    return max(0.0, time.time() - started_at)


def build_health_envelope(now: datetime | None = None) -> dict:
    now = now or datetime.now(timezone.utc)
    return {
        "status": "ok",
        "timestamp": now.isoformat().replace("+00:00", "Z"),
        "uptime": process_uptime(),
    }
