"""DeleteBeatUseCase - Suppression d'un beat."""

from backoffice.application.common.result import Result
from backoffice.application.dto.base import to_record
from backoffice.application.dto.beat_dto import BeatOutput
from backoffice.application.ports.services import ActivityLogger
from backoffice.domain.entities import Beat
from backoffice.domain.exceptions import BeatNotFoundError
from backoffice.domain.ports.repository import Repository


class DeleteBeatUseCase:

    def __init__(self, beat_repo: Repository[Beat, int], activity_logger: ActivityLogger):
        self._beat_repo = beat_repo
        self._activity_logger = activity_logger

    async def execute(self, beat_id: int) -> Result[None]:
        beat = await self._beat_repo.find_by_id(beat_id)
        if beat is None:
            return Result.fail(BeatNotFoundError(beat_id))

        await self._beat_repo.delete(beat_id)

        await self._activity_logger.log_delete(
            "beat", beat_id, to_record(BeatOutput.from_entity(beat))
        )
        return Result.ok()
