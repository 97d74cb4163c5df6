"""GetBrandUseCase - Lecture d'une marque par ID."""

from backoffice.application.common.result import Result
from backoffice.application.dto.brand_dto import BrandOutput
from backoffice.domain.entities import Brand
from backoffice.domain.exceptions import BrandNotFoundError
from backoffice.domain.ports.repository import Repository


class GetBrandUseCase:

    def __init__(self, brand_repo: Repository[Brand, int]):
        self._brand_repo = brand_repo

    async def execute(self, brand_id: int) -> Result[BrandOutput]:
        brand = await self._brand_repo.find_by_id(brand_id)
        if brand is None:
            return Result.fail(BrandNotFoundError(brand_id))
        return Result.ok(BrandOutput.from_entity(brand))
