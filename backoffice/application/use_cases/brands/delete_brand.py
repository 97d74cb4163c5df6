"""
DeleteBrandUseCase - Suppression d'une marque.

Regles:
-------
- Marque inexistante -> BRAND_NOT_FOUND
- Beats existants -> BRAND_HAS_BEATS (rien n'est supprime)
"""

from backoffice.application.common.result import Result
from backoffice.application.dto.base import to_record
from backoffice.application.dto.brand_dto import BrandOutput
from backoffice.application.ports.services import ActivityLogger
from backoffice.domain.entities import Beat
from backoffice.domain.exceptions import BrandHasBeatsError, BrandNotFoundError
from backoffice.domain.ports.unit_of_work import Repositories, UnitOfWork
from backoffice.domain.specification import Specification


class DeleteBrandUseCase:

    def __init__(self, unit_of_work: UnitOfWork, activity_logger: ActivityLogger):
        self._unit_of_work = unit_of_work
        self._activity_logger = activity_logger

    async def execute(self, brand_id: int) -> Result[None]:
        before: dict = {}

        async def work(repos: Repositories) -> Result[None]:
            brand = await repos.brands.find_by_id(brand_id)
            if brand is None:
                return Result.fail(BrandNotFoundError(brand_id))

            beats_count = await repos.beats.count(
                Specification(Beat).where_equal("brand_id", brand_id)
            )
            if beats_count > 0:
                return Result.fail(BrandHasBeatsError(brand_id, beats_count))

            before.update(to_record(BrandOutput.from_entity(brand)))
            await repos.brands.delete(brand_id)
            return Result.ok()

        result = await self._unit_of_work.execute(work)

        if result.success:
            await self._activity_logger.log_delete("brand", brand_id, before)
        return result
