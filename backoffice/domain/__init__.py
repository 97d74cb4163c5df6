"""
Domain Layer - Coeur metier de l'application.

Ce module contient:
    - entities/: Entites du domaine (User, Role, Influencer, Brand, Beat)
    - value_objects/: Cles de roles integres
    - specification: Constructeur de requetes independant du stockage
    - ports/: Contrats Repository et UnitOfWork
    - exceptions: Exceptions metier

Principes:
    - AUCUNE dependance vers les couches externes
    - Testable sans infrastructure
"""

from backoffice.domain.exceptions import DomainException, ErrorKind

__all__ = [
    "DomainException",
    "ErrorKind",
]
