"""
Wall-clock and uptime source.

Uptime is read from a monotonic counter started when this module is first
imported, so it tracks process runtime and is unaffected by system clock
adjustments. Wall-clock values are always UTC.
"""

import time
from dataclasses import dataclass
from datetime import datetime, timezone

# Monotonic reading taken at process start
_PROCESS_STARTED = time.monotonic()


def isoformat_utc(moment: datetime) -> str:
    """Format a datetime as ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class Clock:
    """Supplies the current UTC time and seconds elapsed since process start."""

    def __init__(self, started_at: float | None = None) -> None:
        self._started_at = _PROCESS_STARTED if started_at is None else started_at

    def now(self) -> datetime:
        return datetime.now(timezone.utc)

    def uptime(self) -> float:
        return max(0.0, time.monotonic() - self._started_at)


@dataclass(frozen=True)
class BootRecord:
    """Boot timestamp captured once per application instance."""

    boot_time: datetime

    @classmethod
    def capture(cls, clock: Clock) -> "BootRecord":
        return cls(boot_time=clock.now())

    @property
    def isoformat(self) -> str:
        return isoformat_utc(self.boot_time)
