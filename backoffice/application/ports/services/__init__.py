"""Interfaces des services externes."""

from backoffice.application.ports.services.activity_logger import (
    ActivityAction,
    ActivityLog,
    ActivityLogger,
)
from backoffice.application.ports.services.clock import Clock, InvalidDurationError
from backoffice.application.ports.services.password_hasher import PasswordHasher
from backoffice.application.ports.services.token_signer import (
    SignedToken,
    TokenSigner,
    TokenVerificationError,
)

__all__ = [
    "PasswordHasher",
    "TokenSigner",
    "SignedToken",
    "TokenVerificationError",
    "Clock",
    "InvalidDurationError",
    "ActivityLogger",
    "ActivityLog",
    "ActivityAction",
]
