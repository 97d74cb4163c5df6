"""
Entites du domaine.

Entites principales:
    - User / UserRole: Detenteur de compte et ses affectations de roles
    - Role: Role attribuable
    - Influencer / SocialPlatform: Influenceur et ses profils sociaux
    - Brand: Marque sponsor
    - Beat: Contenu promotionnel (influenceur + marque)
"""

from backoffice.domain.entities.beat import Beat
from backoffice.domain.entities.brand import Brand
from backoffice.domain.entities.influencer import (
    Influencer,
    InvalidFollowersCountError,
    SocialPlatform,
)
from backoffice.domain.entities.role import Role
from backoffice.domain.entities.user import User, UserRole

__all__ = [
    "User",
    "UserRole",
    "Role",
    "Influencer",
    "SocialPlatform",
    "InvalidFollowersCountError",
    "Brand",
    "Beat",
]
