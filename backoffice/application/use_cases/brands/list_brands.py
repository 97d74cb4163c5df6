"""ListBrandsUseCase - Liste paginee des marques (recherche sur les noms)."""

from dataclasses import dataclass
from typing import Optional

from backoffice.application.common.pagination import (
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    PaginatedResult,
    paginate_result,
)
from backoffice.application.common.result import Result
from backoffice.application.dto.brand_dto import BrandOutput
from backoffice.domain.entities import Brand
from backoffice.domain.ports.repository import Repository
from backoffice.domain.specification import SortDirection, Specification


@dataclass
class ListBrandsRequest:
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT
    search: Optional[str] = None


class ListBrandsUseCase:

    SEARCH_FIELDS = ("name_en", "name_ar")

    def __init__(self, brand_repo: Repository[Brand, int]):
        self._brand_repo = brand_repo

    async def execute(
        self, request: Optional[ListBrandsRequest] = None
    ) -> Result[PaginatedResult[BrandOutput]]:
        request = request or ListBrandsRequest()

        spec = (
            Specification(Brand)
            .search_in(self.SEARCH_FIELDS, request.search)
            .order_by("created_at", SortDirection.DESC)
            .paginate(request.page, request.limit)
        )
        listing = await self._brand_repo.list(spec)

        return Result.ok(paginate_result(
            listing, request.page, request.limit, BrandOutput.from_entity
        ))
