"""
DTOs de sortie des use cases.

Les use cases ne retournent jamais d'entite du domaine ni de
modele ORM: uniquement ces vues immuables.
"""

from backoffice.application.dto.base import to_record
from backoffice.application.dto.beat_dto import BeatOutput
from backoffice.application.dto.brand_dto import BrandOutput, BrandSummary
from backoffice.application.dto.influencer_dto import (
    InfluencerOutput,
    InfluencerSummary,
    SocialPlatformOutput,
)
from backoffice.application.dto.user_dto import (
    LoginOutput,
    RoleOutput,
    UserOutput,
    UserValidationOutput,
)

__all__ = [
    "to_record",
    "RoleOutput",
    "UserOutput",
    "LoginOutput",
    "UserValidationOutput",
    "SocialPlatformOutput",
    "InfluencerOutput",
    "InfluencerSummary",
    "BrandOutput",
    "BrandSummary",
    "BeatOutput",
]
