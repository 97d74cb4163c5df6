"""
Interface du service de signature de tokens.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional


class TokenVerificationError(Exception):
    """Leve par verify() quand le token est invalide ou expire."""


@dataclass(frozen=True)
class SignedToken:
    """
    Token signe.

    Attributes:
        token: Token encode.
        expires_at: Date d'expiration (None si le signataire ne la connait pas).
    """

    token: str
    expires_at: Optional[datetime] = None


class TokenSigner(ABC):
    """
    Signe et verifie des claims.

    Implementee par JwtTokenSigner.
    """

    @abstractmethod
    async def sign(
        self, claims: dict[str, Any], expires_in: Optional[str] = None
    ) -> SignedToken:
        """
        Signe les claims.

        Args:
            claims: Claims a signer.
            expires_in: Duree de validite ("30s", "15m", "1h", "7d").
        """
        ...

    @abstractmethod
    async def verify(self, token: str) -> dict[str, Any]:
        """
        Verifie signature et expiration, retourne les claims.

        Raises:
            TokenVerificationError: Token invalide ou expire.
        """
        ...

    @abstractmethod
    def decode(self, token: str) -> dict[str, Any]:
        """Decode sans verification (inspection uniquement)."""
        ...
