"""
JwtTokenSigner - Signature et verification de tokens JWT (PyJWT).

Responsabilite unique:
----------------------
Signer des claims avec une duree de vie ("1h", "15m", ...) et
verifier signature + expiration.

Usage:
------
    signer = JwtTokenSigner(secret, clock=SystemClock())
    signed = await signer.sign({"sub": user_id}, expires_in="1h")
    claims = await signer.verify(signed.token)
"""

from typing import Any, Optional

import jwt
from jwt.exceptions import PyJWTError

from backoffice.application.ports.services import (
    Clock,
    SignedToken,
    TokenSigner,
    TokenVerificationError,
)


class JwtTokenSigner(TokenSigner):
    """
    Implementation PyJWT du port TokenSigner.

    Attributes:
        secret: Cle de signature.
        algorithm: Algorithme (HS256 par defaut).
        default_expires_in: Duree appliquee si sign() n'en recoit pas.
    """

    def __init__(
        self,
        secret: str,
        clock: Clock,
        algorithm: str = "HS256",
        default_expires_in: str = "1h",
    ):
        self._secret = secret
        self._clock = clock
        self._algorithm = algorithm
        self._default_expires_in = default_expires_in

    async def sign(
        self, claims: dict[str, Any], expires_in: Optional[str] = None
    ) -> SignedToken:
        now = self._clock.now()
        expires_at = self._clock.add_duration(now, expires_in or self._default_expires_in)
        payload = {**claims, "iat": now, "exp": expires_at}
        token = jwt.encode(payload, self._secret, algorithm=self._algorithm)
        return SignedToken(token=token, expires_at=expires_at)

    async def verify(self, token: str) -> dict[str, Any]:
        try:
            return jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except PyJWTError as e:
            raise TokenVerificationError(str(e)) from e

    def decode(self, token: str) -> dict[str, Any]:
        try:
            return jwt.decode(
                token,
                options={"verify_signature": False, "verify_exp": False},
                algorithms=[self._algorithm],
            )
        except PyJWTError as e:
            raise TokenVerificationError(str(e)) from e
