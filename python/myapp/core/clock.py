"""
Time source used by the HTTP handlers.

Handlers never call ``datetime.now`` directly; they ask the clock stored on the
application so tests can pin the current instant.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone


class Clock(ABC):
    """Source of the current instant."""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current time as a timezone-aware datetime."""


class SystemClock(Clock):
    """Wall clock in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


def format_rfc3339(moment: datetime) -> str:
    """
    Format an aware datetime as RFC 3339 with second precision.

    UTC is written as ``Z``; any other offset as ``+HH:MM``.

    Args:
        moment: Timezone-aware datetime.

    Returns:
        Timestamp such as ``2024-01-01T00:00:00Z``.
    """
    if moment.tzinfo is None or moment.utcoffset() is None:
        raise ValueError(f"RFC 3339 needs a timezone-aware datetime, got {moment!r}")

    text = moment.replace(microsecond=0).isoformat()
    if text.endswith("+00:00"):
        text = text[: -len("+00:00")] + "Z"
    return text
