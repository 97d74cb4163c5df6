"""
CreateInfluencerUseCase - Creation d'un influenceur et de ses profils.

Responsabilite unique:
----------------------
Creer un influenceur avec ses profils sociaux initiaux.

Regles:
-------
- username deja pris -> INFLUENCER_USERNAME_ALREADY_EXISTS
- email deja pris -> INFLUENCER_EMAIL_ALREADY_EXISTS
- deux profils de meme plateforme -> EXISTING_SOCIAL_PLATFORM_FOR_INFLUENCER

L'influenceur et ses profils sont crees dans la meme transaction:
aucun influenceur partiel ne reste en cas d'echec.
"""

from dataclasses import dataclass, field
from typing import Optional

from backoffice.application.common.result import Result
from backoffice.application.dto.base import to_record
from backoffice.application.dto.influencer_dto import InfluencerOutput
from backoffice.application.ports.services import ActivityLogger
from backoffice.domain.entities import Influencer, SocialPlatform
from backoffice.domain.exceptions import (
    ExistingSocialPlatformForInfluencerError,
    InfluencerEmailAlreadyExistsError,
    InfluencerUsernameAlreadyExistsError,
)
from backoffice.domain.ports.unit_of_work import Repositories, UnitOfWork
from backoffice.domain.specification import Specification
from backoffice.domain.value_objects import normalize_email


@dataclass
class SocialPlatformInput:
    """Profil social fourni a la creation."""
    key: str
    url: str
    number_of_followers: int = 0


@dataclass
class CreateInfluencerRequest:
    """
    Requete de creation d'influenceur.

    Attributes:
        username: Identifiant public (unique).
        email: Adresse email (unique).
        name_en: Nom anglais.
        name_ar: Nom arabe.
        profile_picture_url: Photo de profil.
        social_platforms: Profils sociaux initiaux.
    """
    username: str
    email: str
    name_en: str
    name_ar: str
    profile_picture_url: Optional[str] = None
    social_platforms: list[SocialPlatformInput] = field(default_factory=list)


class CreateInfluencerUseCase:
    """Use case de creation d'influenceur."""

    def __init__(self, unit_of_work: UnitOfWork, activity_logger: ActivityLogger):
        self._unit_of_work = unit_of_work
        self._activity_logger = activity_logger

    async def execute(self, request: CreateInfluencerRequest) -> Result[InfluencerOutput]:
        username = request.username.strip()
        email = normalize_email(request.email)

        async def work(repos: Repositories) -> Result[InfluencerOutput]:
            if await repos.influencers.exists(
                Specification(Influencer).where_equal("username", username)
            ):
                return Result.fail(InfluencerUsernameAlreadyExistsError(username))

            if await repos.influencers.exists(
                Specification(Influencer).where_equal("email", email)
            ):
                return Result.fail(InfluencerEmailAlreadyExistsError(email))

            influencer = Influencer(
                username=username,
                email=email,
                name_en=request.name_en,
                name_ar=request.name_ar,
                profile_picture_url=request.profile_picture_url,
            )
            for item in request.social_platforms:
                if influencer.get_social_platform(item.key) is not None:
                    return Result.fail(ExistingSocialPlatformForInfluencerError(item.key))
                influencer.add_social_platform(SocialPlatform(
                    key=item.key,
                    url=item.url,
                    number_of_followers=item.number_of_followers,
                ))

            created = await repos.influencers.create(influencer)
            return Result.ok(InfluencerOutput.from_entity(created))

        result = await self._unit_of_work.execute(work)

        if result.success:
            await self._activity_logger.log_create(
                "influencer", result.value.id, to_record(result.value)
            )
        return result
