"""
Repositories SQLAlchemy (adapters du port Repository).
"""

from backoffice.infrastructure.persistence.repositories.auth_repositories import (
    SqlAlchemyRoleRepository,
    SqlAlchemyUserRepository,
)
from backoffice.infrastructure.persistence.repositories.base_repository import (
    SqlAlchemyRepository,
)
from backoffice.infrastructure.persistence.repositories.catalog_repositories import (
    SqlAlchemyBeatRepository,
    SqlAlchemyBrandRepository,
    SqlAlchemyInfluencerRepository,
    SqlAlchemySocialPlatformRepository,
)

__all__ = [
    "SqlAlchemyRepository",
    "SqlAlchemyUserRepository",
    "SqlAlchemyRoleRepository",
    "SqlAlchemyInfluencerRepository",
    "SqlAlchemySocialPlatformRepository",
    "SqlAlchemyBrandRepository",
    "SqlAlchemyBeatRepository",
]
