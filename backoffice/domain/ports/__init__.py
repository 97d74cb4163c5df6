"""
Ports du domaine (interfaces).

Les ports definissent les contrats que les adapters doivent
implementer, sans dependance vers l'infrastructure.
"""

from backoffice.domain.ports.repository import (
    ListResult,
    RecordNotFoundError,
    Repository,
)
from backoffice.domain.ports.unit_of_work import Repositories, UnitOfWork

__all__ = [
    "Repository",
    "ListResult",
    "RecordNotFoundError",
    "Repositories",
    "UnitOfWork",
]
