"""
Use Cases des influenceurs.

Use Cases:
----------
- CreateInfluencerUseCase: Creation avec profils sociaux
- GetInfluencerUseCase / ListInfluencersUseCase: Lecture
- UpdateInfluencerUseCase: Modification
- DeleteInfluencerUseCase: Suppression (bloquee si des beats existent)
- ManageSocialPlatformUseCase: Gestion des profils sociaux
"""

from backoffice.application.use_cases.influencers.create_influencer import (
    CreateInfluencerRequest,
    CreateInfluencerUseCase,
    SocialPlatformInput,
)
from backoffice.application.use_cases.influencers.delete_influencer import (
    DeleteInfluencerUseCase,
)
from backoffice.application.use_cases.influencers.get_influencer import GetInfluencerUseCase
from backoffice.application.use_cases.influencers.list_influencers import (
    ListInfluencersRequest,
    ListInfluencersUseCase,
)
from backoffice.application.use_cases.influencers.manage_social_platform import (
    AddSocialPlatformRequest,
    ManageSocialPlatformUseCase,
    UpdateSocialPlatformRequest,
)
from backoffice.application.use_cases.influencers.update_influencer import (
    UpdateInfluencerRequest,
    UpdateInfluencerUseCase,
)

__all__ = [
    "CreateInfluencerUseCase",
    "CreateInfluencerRequest",
    "SocialPlatformInput",
    "GetInfluencerUseCase",
    "ListInfluencersUseCase",
    "ListInfluencersRequest",
    "UpdateInfluencerUseCase",
    "UpdateInfluencerRequest",
    "DeleteInfluencerUseCase",
    "ManageSocialPlatformUseCase",
    "AddSocialPlatformRequest",
    "UpdateSocialPlatformRequest",
]
