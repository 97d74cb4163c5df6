"""
SystemClock - Horloge systeme (UTC).

Durees acceptees: "<n><unite>" avec unite s, m, h ou d
(ex: "30s", "15m", "1h", "7d").
"""

import re
from datetime import datetime, timedelta, timezone

from backoffice.application.ports.services import Clock, InvalidDurationError

_DURATION = re.compile(r"^(\d+)([smhd])$")

_UNITS = {
    "s": "seconds",
    "m": "minutes",
    "h": "hours",
    "d": "days",
}


def parse_duration(value: str) -> timedelta:
    """
    Convertit une duree textuelle en timedelta.

    Raises:
        InvalidDurationError: Format non reconnu.

    Example:
        >>> parse_duration("15m")
        datetime.timedelta(seconds=900)
    """
    match = _DURATION.match((value or "").strip())
    if not match:
        raise InvalidDurationError(value)
    amount, unit = match.groups()
    return timedelta(**{_UNITS[unit]: int(amount)})


class SystemClock(Clock):
    def now(self) -> datetime:
        return datetime.now(timezone.utc)

    def add_duration(self, moment: datetime, duration: str) -> datetime:
        return moment + parse_duration(duration)
