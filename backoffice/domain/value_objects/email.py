"""
Value Object pour une adresse email.
"""

import re
from dataclasses import dataclass
from typing import Any

from backoffice.domain.exceptions import InvalidEmailError

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


def normalize_email(email: str) -> str:
    """Normalise une adresse email (trim + minuscules)."""
    return email.strip().lower()


@dataclass(frozen=True, slots=True)
class Email:
    """
    Adresse email normalisee.

    La valeur stockee est toujours en minuscules et sans espaces
    autour: utiliser from_string() pour une saisie brute.

    Example:
        >>> str(Email.from_string("  Jane@Example.COM "))
        'jane@example.com'
    """

    value: str

    def __post_init__(self) -> None:
        """Valide l'adresse apres initialisation."""
        self._validate(self.value)

    @staticmethod
    def _validate(value: Any) -> None:
        """
        Valide le format nom@domaine.ext.

        Raises:
            InvalidEmailError: Si la valeur n'est pas une adresse valide.
        """
        if not isinstance(value, str) or not EMAIL_PATTERN.fullmatch(value):
            raise InvalidEmailError(value)
        if value != normalize_email(value):
            raise InvalidEmailError(value)

    @classmethod
    def from_string(cls, value: Any) -> "Email":
        """Normalise puis valide une saisie brute."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise InvalidEmailError(value)
        return cls(normalize_email(value))

    def __str__(self) -> str:
        return self.value
