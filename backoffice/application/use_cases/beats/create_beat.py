"""
CreateBeatUseCase - Creation d'un beat.

Regles:
-------
- Influenceur reference inexistant -> BEAT_INFLUENCER_NOT_FOUND
- Marque referencee inexistante -> BEAT_BRAND_NOT_FOUND

Verifications et creation dans la meme transaction.
"""

from dataclasses import dataclass
from typing import Optional

from backoffice.application.common.result import Result
from backoffice.application.dto.base import to_record
from backoffice.application.dto.beat_dto import BeatOutput
from backoffice.application.ports.services import ActivityLogger
from backoffice.domain.entities import Beat
from backoffice.domain.entities.beat import ACTIVE_STATUS
from backoffice.domain.exceptions import BeatBrandNotFoundError, BeatInfluencerNotFoundError
from backoffice.domain.ports.unit_of_work import Repositories, UnitOfWork

BEAT_RELATIONS = ("influencer", "brand")


@dataclass
class CreateBeatRequest:
    media_url: str
    thumbnail_url: str
    influencer_id: int
    brand_id: int
    caption: Optional[str] = None
    status_key: str = ACTIVE_STATUS


async def check_references(
    repos: Repositories, influencer_id: Optional[int], brand_id: Optional[int]
):
    """Retourne l'erreur de la premiere reference absente, ou None."""
    if influencer_id is not None:
        if await repos.influencers.find_by_id(influencer_id) is None:
            return BeatInfluencerNotFoundError(influencer_id)
    if brand_id is not None:
        if await repos.brands.find_by_id(brand_id) is None:
            return BeatBrandNotFoundError(brand_id)
    return None


class CreateBeatUseCase:

    def __init__(self, unit_of_work: UnitOfWork, activity_logger: ActivityLogger):
        self._unit_of_work = unit_of_work
        self._activity_logger = activity_logger

    async def execute(self, request: CreateBeatRequest) -> Result[BeatOutput]:
        async def work(repos: Repositories) -> Result[BeatOutput]:
            missing = await check_references(repos, request.influencer_id, request.brand_id)
            if missing:
                return Result.fail(missing)

            created = await repos.beats.create(Beat(
                media_url=request.media_url,
                thumbnail_url=request.thumbnail_url,
                status_key=request.status_key,
                influencer_id=request.influencer_id,
                brand_id=request.brand_id,
                caption=request.caption,
            ))
            beat = await repos.beats.find_by_id(created.id, includes=BEAT_RELATIONS)
            return Result.ok(BeatOutput.from_entity(beat))

        result = await self._unit_of_work.execute(work)

        if result.success:
            await self._activity_logger.log_create(
                "beat", result.value.id, to_record(result.value)
            )
        return result
