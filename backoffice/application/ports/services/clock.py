"""
Interface d'horloge.

Permet d'injecter le temps dans les use cases (tests deterministes).
"""

from abc import ABC, abstractmethod
from datetime import datetime


class InvalidDurationError(ValueError):
    """Leve quand une duree n'a pas le format '<n><s|m|h|d>'."""

    def __init__(self, value: str) -> None:
        super().__init__(
            f"Duree invalide: '{value}'. Format attendu: <nombre><s|m|h|d>"
        )
        self.invalid_value = value


class Clock(ABC):
    """Source du temps courant."""

    @abstractmethod
    def now(self) -> datetime:
        """Instant courant (UTC, timezone-aware)."""
        ...

    @abstractmethod
    def add_duration(self, moment: datetime, duration: str) -> datetime:
        """Ajoute une duree '<n><s|m|h|d>' a `moment`."""
        ...
