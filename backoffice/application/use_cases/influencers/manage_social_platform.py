"""
ManageSocialPlatformUseCase - Gestion des profils sociaux d'un influenceur.

Responsabilite unique:
----------------------
Ajouter, modifier, ajouter-ou-modifier et retirer le profil d'un
influenceur sur une plateforme donnee.

Regles:
-------
- Influenceur inexistant -> INFLUENCER_NOT_FOUND (avant toute autre verification)
- add: profil deja present -> EXISTING_SOCIAL_PLATFORM_FOR_INFLUENCER
- update / remove: profil absent -> SOCIAL_PLATFORM_NOT_FOUND
- add_or_update: cree si absent (url obligatoire), modifie sinon

Chaque operation s'execute dans un UnitOfWork.
"""

from dataclasses import dataclass
from typing import Optional

from backoffice.application.common.result import Result
from backoffice.application.dto.base import to_record
from backoffice.application.dto.influencer_dto import SocialPlatformOutput
from backoffice.application.ports.services import ActivityLogger
from backoffice.domain.entities import SocialPlatform
from backoffice.domain.exceptions import (
    ExistingSocialPlatformForInfluencerError,
    InfluencerNotFoundError,
    SocialPlatformNotFoundError,
)
from backoffice.domain.ports.unit_of_work import Repositories, UnitOfWork
from backoffice.domain.specification import Specification


@dataclass
class AddSocialPlatformRequest:
    influencer_id: int
    key: str
    url: str
    number_of_followers: int = 0


@dataclass
class UpdateSocialPlatformRequest:
    """Champs a None inchanges."""
    influencer_id: int
    key: str
    url: Optional[str] = None
    number_of_followers: Optional[int] = None


class ManageSocialPlatformUseCase:
    """
    Use case de gestion des profils sociaux.

    Example:
        >>> result = await use_case.add_or_update(UpdateSocialPlatformRequest(
        ...     influencer_id=1, key="instagram",
        ...     url="https://instagram.com/sara", number_of_followers=1200))
        >>> result.value.number_of_followers
        1200
    """

    ENTITY_TYPE = "social_platform"

    def __init__(self, unit_of_work: UnitOfWork, activity_logger: ActivityLogger):
        self._unit_of_work = unit_of_work
        self._activity_logger = activity_logger

    async def add(self, request: AddSocialPlatformRequest) -> Result[SocialPlatformOutput]:
        async def work(repos: Repositories) -> Result[SocialPlatformOutput]:
            if not await self._influencer_exists(repos, request.influencer_id):
                return Result.fail(InfluencerNotFoundError(request.influencer_id))

            if await self._find(repos, request.influencer_id, request.key) is not None:
                return Result.fail(ExistingSocialPlatformForInfluencerError(request.key))

            created = await repos.social_platforms.create(SocialPlatform(
                key=request.key,
                url=request.url,
                number_of_followers=request.number_of_followers,
                influencer_id=request.influencer_id,
            ))
            return Result.ok(SocialPlatformOutput.from_entity(created))

        result = await self._unit_of_work.execute(work)
        if result.success:
            await self._activity_logger.log_create(
                self.ENTITY_TYPE, result.value.id, to_record(result.value)
            )
        return result

    async def update(self, request: UpdateSocialPlatformRequest) -> Result[SocialPlatformOutput]:
        before: dict = {}

        async def work(repos: Repositories) -> Result[SocialPlatformOutput]:
            if not await self._influencer_exists(repos, request.influencer_id):
                return Result.fail(InfluencerNotFoundError(request.influencer_id))

            platform = await self._find(repos, request.influencer_id, request.key)
            if platform is None:
                return Result.fail(SocialPlatformNotFoundError(request.key))

            before.update(to_record(SocialPlatformOutput.from_entity(platform)))
            return Result.ok(await self._apply_update(repos, platform, request))

        result = await self._unit_of_work.execute(work)
        if result.success:
            await self._activity_logger.log_update(
                self.ENTITY_TYPE, result.value.id, before, to_record(result.value)
            )
        return result

    async def add_or_update(
        self, request: UpdateSocialPlatformRequest
    ) -> Result[SocialPlatformOutput]:
        before: dict = {}

        async def work(repos: Repositories) -> Result[SocialPlatformOutput]:
            if not await self._influencer_exists(repos, request.influencer_id):
                return Result.fail(InfluencerNotFoundError(request.influencer_id))

            platform = await self._find(repos, request.influencer_id, request.key)
            if platform is not None:
                before.update(to_record(SocialPlatformOutput.from_entity(platform)))
                return Result.ok(await self._apply_update(repos, platform, request))

            # Creation impossible sans URL
            if not request.url:
                return Result.fail(SocialPlatformNotFoundError(request.key))

            created = await repos.social_platforms.create(SocialPlatform(
                key=request.key,
                url=request.url,
                number_of_followers=request.number_of_followers or 0,
                influencer_id=request.influencer_id,
            ))
            return Result.ok(SocialPlatformOutput.from_entity(created))

        result = await self._unit_of_work.execute(work)
        if result.success:
            if before:
                await self._activity_logger.log_update(
                    self.ENTITY_TYPE, result.value.id, before, to_record(result.value)
                )
            else:
                await self._activity_logger.log_create(
                    self.ENTITY_TYPE, result.value.id, to_record(result.value)
                )
        return result

    async def remove(self, influencer_id: int, key: str) -> Result[None]:
        before: dict = {}

        async def work(repos: Repositories) -> Result[None]:
            if not await self._influencer_exists(repos, influencer_id):
                return Result.fail(InfluencerNotFoundError(influencer_id))

            platform = await self._find(repos, influencer_id, key)
            if platform is None:
                return Result.fail(SocialPlatformNotFoundError(key))

            before.update(to_record(SocialPlatformOutput.from_entity(platform)))
            await repos.social_platforms.delete(platform.id)
            return Result.ok()

        result = await self._unit_of_work.execute(work)
        if result.success:
            await self._activity_logger.log_delete(self.ENTITY_TYPE, before["id"], before)
        return result

    async def _influencer_exists(self, repos: Repositories, influencer_id: int) -> bool:
        return await repos.influencers.find_by_id(influencer_id) is not None

    async def _find(
        self, repos: Repositories, influencer_id: int, key: str
    ) -> Optional[SocialPlatform]:
        return await repos.social_platforms.find_one(
            Specification(SocialPlatform)
            .where_equal("influencer_id", influencer_id)
            .where_equal("key", key)
        )

    async def _apply_update(
        self,
        repos: Repositories,
        platform: SocialPlatform,
        request: UpdateSocialPlatformRequest,
    ) -> SocialPlatformOutput:
        if request.url is not None:
            platform.url = request.url
        if request.number_of_followers is not None:
            platform.update_followers(request.number_of_followers)
        updated = await repos.social_platforms.update(platform)
        return SocialPlatformOutput.from_entity(updated)
