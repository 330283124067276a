from datetime import datetime

from myapp.core.clock import Clock


class FixedClock(Clock):
    """Clock pinned to a single instant."""

    def __init__(self, moment: datetime) -> None:
        self.moment = moment

    def now(self) -> datetime:
        return self.moment
