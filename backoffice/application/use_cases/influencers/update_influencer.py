"""
UpdateInfluencerUseCase - Modification d'un influenceur.

Regles:
-------
- Influenceur inexistant -> INFLUENCER_NOT_FOUND
- username / email pris par UN AUTRE influenceur -> *_ALREADY_EXISTS
- Les profils sociaux ne sont pas modifies ici
  (voir ManageSocialPlatformUseCase)
"""

from dataclasses import dataclass
from typing import Optional

from backoffice.application.common.result import Result
from backoffice.application.dto.base import to_record
from backoffice.application.dto.influencer_dto import InfluencerOutput
from backoffice.application.ports.services import ActivityLogger
from backoffice.domain.entities import Influencer
from backoffice.domain.exceptions import (
    InfluencerEmailAlreadyExistsError,
    InfluencerNotFoundError,
    InfluencerUsernameAlreadyExistsError,
)
from backoffice.domain.ports.unit_of_work import Repositories, UnitOfWork
from backoffice.domain.specification import Specification
from backoffice.domain.value_objects import normalize_email


@dataclass
class UpdateInfluencerRequest:
    influencer_id: int
    username: Optional[str] = None
    email: Optional[str] = None
    name_en: Optional[str] = None
    name_ar: Optional[str] = None
    profile_picture_url: Optional[str] = None


class UpdateInfluencerUseCase:

    def __init__(self, unit_of_work: UnitOfWork, activity_logger: ActivityLogger):
        self._unit_of_work = unit_of_work
        self._activity_logger = activity_logger

    async def execute(self, request: UpdateInfluencerRequest) -> Result[InfluencerOutput]:
        before: dict = {}

        async def work(repos: Repositories) -> Result[InfluencerOutput]:
            influencer = await repos.influencers.find_by_id(
                request.influencer_id, includes=["social_platforms"]
            )
            if influencer is None:
                return Result.fail(InfluencerNotFoundError(request.influencer_id))

            before.update(to_record(InfluencerOutput.from_entity(influencer)))

            username = request.username.strip() if request.username else None
            if username and username != influencer.username:
                if await repos.influencers.exists(
                    Specification(Influencer)
                    .where_equal("username", username)
                    .where_not_equal("id", influencer.id)
                ):
                    return Result.fail(InfluencerUsernameAlreadyExistsError(username))

            email = normalize_email(request.email) if request.email else None
            if email and email != influencer.email:
                if await repos.influencers.exists(
                    Specification(Influencer)
                    .where_equal("email", email)
                    .where_not_equal("id", influencer.id)
                ):
                    return Result.fail(InfluencerEmailAlreadyExistsError(email))

            if username is not None:
                influencer.username = username
            if email is not None:
                influencer.email = email
            if request.name_en is not None:
                influencer.name_en = request.name_en
            if request.name_ar is not None:
                influencer.name_ar = request.name_ar
            if request.profile_picture_url is not None:
                influencer.profile_picture_url = request.profile_picture_url

            updated = await repos.influencers.update(influencer)
            return Result.ok(InfluencerOutput.from_entity(updated))

        result = await self._unit_of_work.execute(work)

        if result.success:
            await self._activity_logger.log_update(
                "influencer", result.value.id, before, to_record(result.value)
            )
        return result
