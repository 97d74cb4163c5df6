"""
Value Object pour un numero de telephone et son indicatif pays.

Regles:
-------
- Numero: chiffres, espaces, tirets, parentheses et '+', 7 chiffres minimum
- Indicatif: '+' suivi de 1 a 4 chiffres
"""

import re
from dataclasses import dataclass
from typing import Any, Optional

from backoffice.domain.exceptions import InvalidCountryCodeError, InvalidPhoneNumberError

PHONE_PATTERN = re.compile(r"[\d\s\-()+]+", re.ASCII)
COUNTRY_CODE_PATTERN = re.compile(r"\+\d{1,4}", re.ASCII)
MIN_DIGITS = 7


@dataclass(frozen=True, slots=True)
class PhoneNumber:
    """
    Numero de telephone complet.

    Attributes:
        number: Numero local (formatage libre).
        country_code: Indicatif pays (+33, +971, ...).

    Example:
        >>> phone = PhoneNumber("50 123 4567", "+971")
        >>> phone.full_number
        '+97150 123 4567'
    """

    number: str
    country_code: str

    def __post_init__(self) -> None:
        self.validate_number(self.number)
        self.validate_country_code(self.country_code)

    @staticmethod
    def validate_number(number: Any) -> None:
        """
        Raises:
            InvalidPhoneNumberError: Caracteres interdits ou moins de 7 chiffres.
        """
        if not isinstance(number, str) or not PHONE_PATTERN.fullmatch(number):
            raise InvalidPhoneNumberError(number)
        if len(re.sub(r"\D", "", number, flags=re.ASCII)) < MIN_DIGITS:
            raise InvalidPhoneNumberError(number)

    @staticmethod
    def validate_country_code(country_code: Any) -> None:
        """
        Raises:
            InvalidCountryCodeError: Si l'indicatif n'est pas de la forme +N.
        """
        if not isinstance(country_code, str) or not COUNTRY_CODE_PATTERN.fullmatch(country_code):
            raise InvalidCountryCodeError(country_code)

    @classmethod
    def validate_parts(
        cls, number: Optional[str] = None, country_code: Optional[str] = None
    ) -> None:
        """Valide chaque partie fournie (les deux sont optionnelles sur un User)."""
        if number is not None:
            cls.validate_number(number)
        if country_code is not None:
            cls.validate_country_code(country_code)

    @property
    def full_number(self) -> str:
        return f"{self.country_code}{self.number}"

    def __str__(self) -> str:
        return self.full_number
