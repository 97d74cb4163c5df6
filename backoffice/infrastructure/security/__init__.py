"""Adapters de securite: hachage des mots de passe et tokens."""

from backoffice.infrastructure.security.bcrypt_hasher import BcryptPasswordHasher
from backoffice.infrastructure.security.jwt_signer import JwtTokenSigner

__all__ = ["BcryptPasswordHasher", "JwtTokenSigner"]
