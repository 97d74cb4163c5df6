"""
UpdateBeatUseCase - Modification d'un beat.

Regles:
-------
- Beat inexistant -> BEAT_NOT_FOUND
- Nouvel influenceur / nouvelle marque inexistant(e)
  -> BEAT_INFLUENCER_NOT_FOUND / BEAT_BRAND_NOT_FOUND
"""

from dataclasses import dataclass
from typing import Optional

from backoffice.application.common.result import Result
from backoffice.application.dto.base import to_record
from backoffice.application.dto.beat_dto import BeatOutput
from backoffice.application.ports.services import ActivityLogger
from backoffice.application.use_cases.beats.create_beat import (
    BEAT_RELATIONS,
    check_references,
)
from backoffice.domain.exceptions import BeatNotFoundError
from backoffice.domain.ports.unit_of_work import Repositories, UnitOfWork


@dataclass
class UpdateBeatRequest:
    beat_id: int
    caption: Optional[str] = None
    media_url: Optional[str] = None
    thumbnail_url: Optional[str] = None
    status_key: Optional[str] = None
    influencer_id: Optional[int] = None
    brand_id: Optional[int] = None


class UpdateBeatUseCase:

    def __init__(self, unit_of_work: UnitOfWork, activity_logger: ActivityLogger):
        self._unit_of_work = unit_of_work
        self._activity_logger = activity_logger

    async def execute(self, request: UpdateBeatRequest) -> Result[BeatOutput]:
        before: dict = {}

        async def work(repos: Repositories) -> Result[BeatOutput]:
            beat = await repos.beats.find_by_id(request.beat_id, includes=BEAT_RELATIONS)
            if beat is None:
                return Result.fail(BeatNotFoundError(request.beat_id))

            before.update(to_record(BeatOutput.from_entity(beat)))

            missing = await check_references(
                repos,
                request.influencer_id if request.influencer_id != beat.influencer_id else None,
                request.brand_id if request.brand_id != beat.brand_id else None,
            )
            if missing:
                return Result.fail(missing)

            if request.caption is not None:
                beat.caption = request.caption
            if request.media_url is not None:
                beat.media_url = request.media_url
            if request.thumbnail_url is not None:
                beat.thumbnail_url = request.thumbnail_url
            if request.status_key is not None:
                beat.status_key = request.status_key
            if request.influencer_id is not None:
                beat.influencer_id = request.influencer_id
            if request.brand_id is not None:
                beat.brand_id = request.brand_id

            await repos.beats.update(beat)
            updated = await repos.beats.find_by_id(beat.id, includes=BEAT_RELATIONS)
            return Result.ok(BeatOutput.from_entity(updated))

        result = await self._unit_of_work.execute(work)

        if result.success:
            await self._activity_logger.log_update(
                "beat", result.value.id, before, to_record(result.value)
            )
        return result
