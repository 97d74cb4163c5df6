"""
ListInfluencersUseCase - Liste paginee des influenceurs.

Recherche sur username, email et noms (anglais/arabe).
"""

from dataclasses import dataclass
from typing import Optional

from backoffice.application.common.pagination import (
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    PaginatedResult,
    paginate_result,
)
from backoffice.application.common.result import Result
from backoffice.application.dto.influencer_dto import InfluencerOutput
from backoffice.domain.entities import Influencer
from backoffice.domain.ports.repository import Repository
from backoffice.domain.specification import SortDirection, Specification


@dataclass
class ListInfluencersRequest:
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT
    search: Optional[str] = None


class ListInfluencersUseCase:

    SEARCH_FIELDS = ("username", "email", "name_en", "name_ar")

    def __init__(self, influencer_repo: Repository[Influencer, int]):
        self._influencer_repo = influencer_repo

    async def execute(
        self, request: Optional[ListInfluencersRequest] = None
    ) -> Result[PaginatedResult[InfluencerOutput]]:
        request = request or ListInfluencersRequest()

        spec = (
            Specification(Influencer)
            .search_in(self.SEARCH_FIELDS, request.search)
            .include("social_platforms")
            .order_by("created_at", SortDirection.DESC)
            .paginate(request.page, request.limit)
        )
        listing = await self._influencer_repo.list(spec)

        return Result.ok(paginate_result(
            listing, request.page, request.limit, InfluencerOutput.from_entity
        ))
