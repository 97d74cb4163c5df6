"""
Modeles SQLAlchemy - exports centralises.

Organisation par domaine:
- base: Base declarative
- auth_models: Utilisateurs, roles, affectations
- catalog_models: Influenceurs, profils sociaux, marques, beats
"""

from backoffice.infrastructure.persistence.models.auth_models import (
    RoleModel,
    UserModel,
    UserRoleModel,
)
from backoffice.infrastructure.persistence.models.base import Base, utcnow
from backoffice.infrastructure.persistence.models.catalog_models import (
    BeatModel,
    BrandModel,
    InfluencerModel,
    SocialPlatformModel,
)

__all__ = [
    "Base",
    "utcnow",
    "UserModel",
    "RoleModel",
    "UserRoleModel",
    "InfluencerModel",
    "SocialPlatformModel",
    "BrandModel",
    "BeatModel",
]
