"""
UpdateBrandUseCase - Modification d'une marque.

Regles:
-------
- Marque inexistante -> BRAND_NOT_FOUND
- Nom (en ou ar) pris par UNE AUTRE marque -> BRAND_NAME_ALREADY_EXISTS
"""

from dataclasses import dataclass
from typing import Optional

from backoffice.application.common.result import Result
from backoffice.application.dto.base import to_record
from backoffice.application.dto.brand_dto import BrandOutput
from backoffice.application.ports.services import ActivityLogger
from backoffice.application.use_cases.brands.create_brand import find_name_conflict
from backoffice.domain.exceptions import BrandNotFoundError
from backoffice.domain.ports.unit_of_work import Repositories, UnitOfWork


@dataclass
class UpdateBrandRequest:
    brand_id: int
    name_en: Optional[str] = None
    name_ar: Optional[str] = None
    logo_url: Optional[str] = None
    website_url: Optional[str] = None


class UpdateBrandUseCase:

    def __init__(self, unit_of_work: UnitOfWork, activity_logger: ActivityLogger):
        self._unit_of_work = unit_of_work
        self._activity_logger = activity_logger

    async def execute(self, request: UpdateBrandRequest) -> Result[BrandOutput]:
        before: dict = {}

        async def work(repos: Repositories) -> Result[BrandOutput]:
            brand = await repos.brands.find_by_id(request.brand_id)
            if brand is None:
                return Result.fail(BrandNotFoundError(request.brand_id))

            before.update(to_record(BrandOutput.from_entity(brand)))

            conflict = await find_name_conflict(
                repos.brands,
                request.name_en if request.name_en != brand.name_en else None,
                request.name_ar if request.name_ar != brand.name_ar else None,
                exclude_id=brand.id,
            )
            if conflict:
                return Result.fail(conflict)

            if request.name_en is not None:
                brand.name_en = request.name_en
            if request.name_ar is not None:
                brand.name_ar = request.name_ar
            if request.logo_url is not None:
                brand.logo_url = request.logo_url
            if request.website_url is not None:
                brand.website_url = request.website_url

            updated = await repos.brands.update(brand)
            return Result.ok(BrandOutput.from_entity(updated))

        result = await self._unit_of_work.execute(work)

        if result.success:
            await self._activity_logger.log_update(
                "brand", result.value.id, before, to_record(result.value)
            )
        return result
