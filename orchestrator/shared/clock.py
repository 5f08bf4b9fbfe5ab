"""Time helpers shared by the orchestrator layers."""

from datetime import datetime, timezone
from time import perf_counter


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def utc_now_iso() -> str:
    """Current UTC time as ISO8601 with millisecond precision and a 'Z' suffix."""
    return utc_now().isoformat(timespec="milliseconds").replace("+00:00", "Z")


def elapsed_ms(started: float) -> int:
    """Milliseconds elapsed since a perf_counter() reading."""
    return int(round((perf_counter() - started) * 1000))
