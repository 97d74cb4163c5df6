"""GetBeatUseCase - Lecture d'un beat avec influenceur et marque."""

from backoffice.application.common.result import Result
from backoffice.application.dto.beat_dto import BeatOutput
from backoffice.application.use_cases.beats.create_beat import BEAT_RELATIONS
from backoffice.domain.entities import Beat
from backoffice.domain.exceptions import BeatNotFoundError
from backoffice.domain.ports.repository import Repository


class GetBeatUseCase:

    def __init__(self, beat_repo: Repository[Beat, int]):
        self._beat_repo = beat_repo

    async def execute(self, beat_id: int) -> Result[BeatOutput]:
        beat = await self._beat_repo.find_by_id(beat_id, includes=BEAT_RELATIONS)
        if beat is None:
            return Result.fail(BeatNotFoundError(beat_id))
        return Result.ok(BeatOutput.from_entity(beat))
