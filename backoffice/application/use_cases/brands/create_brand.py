"""
CreateBrandUseCase - Creation d'une marque.

Regles:
-------
Le nom anglais et le nom arabe sont chacun uniques, verifies
independamment -> BRAND_NAME_ALREADY_EXISTS.
"""

from dataclasses import dataclass
from typing import Optional

from backoffice.application.common.result import Result
from backoffice.application.dto.base import to_record
from backoffice.application.dto.brand_dto import BrandOutput
from backoffice.application.ports.services import ActivityLogger
from backoffice.domain.entities import Brand
from backoffice.domain.exceptions import BrandNameAlreadyExistsError
from backoffice.domain.ports.repository import Repository
from backoffice.domain.ports.unit_of_work import Repositories, UnitOfWork
from backoffice.domain.specification import Specification


@dataclass
class CreateBrandRequest:
    name_en: str
    name_ar: str
    logo_url: Optional[str] = None
    website_url: Optional[str] = None


async def find_name_conflict(
    brand_repo: Repository[Brand, int],
    name_en: Optional[str],
    name_ar: Optional[str],
    exclude_id: Optional[int] = None,
) -> Optional[BrandNameAlreadyExistsError]:
    """
    Verifie l'unicite de chaque nom (en puis ar).

    Args:
        exclude_id: ID de la marque modifiee (auto-exclusion).
    """
    for field_name, value, language in (
        ("name_en", name_en, "en"),
        ("name_ar", name_ar, "ar"),
    ):
        if value is None:
            continue
        spec = Specification(Brand).where_equal(field_name, value)
        if exclude_id is not None:
            spec.where_not_equal("id", exclude_id)
        if await brand_repo.exists(spec):
            return BrandNameAlreadyExistsError(value, language)
    return None


class CreateBrandUseCase:

    def __init__(self, unit_of_work: UnitOfWork, activity_logger: ActivityLogger):
        self._unit_of_work = unit_of_work
        self._activity_logger = activity_logger

    async def execute(self, request: CreateBrandRequest) -> Result[BrandOutput]:
        async def work(repos: Repositories) -> Result[BrandOutput]:
            conflict = await find_name_conflict(
                repos.brands, request.name_en, request.name_ar
            )
            if conflict:
                return Result.fail(conflict)

            created = await repos.brands.create(Brand(
                name_en=request.name_en,
                name_ar=request.name_ar,
                logo_url=request.logo_url,
                website_url=request.website_url,
            ))
            return Result.ok(BrandOutput.from_entity(created))

        result = await self._unit_of_work.execute(work)

        if result.success:
            await self._activity_logger.log_create(
                "brand", result.value.id, to_record(result.value)
            )
        return result
