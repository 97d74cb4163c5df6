"""
Ports (Interfaces) de l'application.

Les ports definissent les contrats que les adapters
de l'infrastructure doivent implementer.

Types de ports:
    - services/: Hachage, signature de tokens, horloge, journal d'activite

Les ports de persistance (Repository, UnitOfWork) sont dans
backoffice.domain.ports.
"""

from backoffice.application.ports.services import (
    ActivityLog,
    ActivityLogger,
    Clock,
    PasswordHasher,
    SignedToken,
    TokenSigner,
)

__all__ = [
    "PasswordHasher",
    "TokenSigner",
    "SignedToken",
    "Clock",
    "ActivityLogger",
    "ActivityLog",
]
