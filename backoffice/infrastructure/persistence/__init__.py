"""
Couche de persistance SQLAlchemy (async).

    backoffice/infrastructure/persistence/
    ├── database.py        DatabaseManager (moteur, sessions)
    ├── models/            Modeles SQLAlchemy
    ├── mappers.py         Conversions modele <-> entite
    ├── repositories/      Repository generique + un par entite
    └── unit_of_work.py    Transaction partagee entre repositories
"""

from backoffice.infrastructure.persistence.database import DatabaseManager
from backoffice.infrastructure.persistence.repositories import (
    SqlAlchemyBeatRepository,
    SqlAlchemyBrandRepository,
    SqlAlchemyInfluencerRepository,
    SqlAlchemyRepository,
    SqlAlchemyRoleRepository,
    SqlAlchemySocialPlatformRepository,
    SqlAlchemyUserRepository,
)
from backoffice.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork

__all__ = [
    "DatabaseManager",
    "SqlAlchemyRepository",
    "SqlAlchemyUserRepository",
    "SqlAlchemyRoleRepository",
    "SqlAlchemyInfluencerRepository",
    "SqlAlchemySocialPlatformRepository",
    "SqlAlchemyBrandRepository",
    "SqlAlchemyBeatRepository",
    "SqlAlchemyUnitOfWork",
]
