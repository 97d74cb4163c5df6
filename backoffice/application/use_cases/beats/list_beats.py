"""
ListBeatsUseCase - Liste paginee des beats.

Filtres (ET): influenceur, marque, statut.
Recherche (OU): legende, noms de la marque, noms et username
de l'influenceur.
Tri: plus recents d'abord. Taille de page par defaut: 10.
"""

from dataclasses import dataclass
from typing import Optional

from backoffice.application.common.pagination import (
    DEFAULT_PAGE,
    PaginatedResult,
    paginate_result,
)
from backoffice.application.common.result import Result
from backoffice.application.dto.beat_dto import BeatOutput
from backoffice.application.use_cases.beats.create_beat import BEAT_RELATIONS
from backoffice.domain.entities import Beat
from backoffice.domain.ports.repository import Repository
from backoffice.domain.specification import SortDirection, Specification

DEFAULT_BEATS_LIMIT = 10


@dataclass
class ListBeatsRequest:
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_BEATS_LIMIT
    search: Optional[str] = None
    influencer_id: Optional[int] = None
    brand_id: Optional[int] = None
    status_key: Optional[str] = None


class ListBeatsUseCase:

    SEARCH_FIELDS = (
        "caption",
        "brand.name_en",
        "brand.name_ar",
        "influencer.name_en",
        "influencer.name_ar",
        "influencer.username",
    )

    def __init__(self, beat_repo: Repository[Beat, int]):
        self._beat_repo = beat_repo

    async def execute(
        self, request: Optional[ListBeatsRequest] = None
    ) -> Result[PaginatedResult[BeatOutput]]:
        request = request or ListBeatsRequest()

        spec = Specification(Beat)
        if request.influencer_id is not None:
            spec.where_equal("influencer_id", request.influencer_id)
        if request.brand_id is not None:
            spec.where_equal("brand_id", request.brand_id)
        if request.status_key:
            spec.where_equal("status_key", request.status_key)

        (
            spec.search_in(self.SEARCH_FIELDS, request.search)
            .include(*BEAT_RELATIONS)
            .order_by("created_at", SortDirection.DESC)
            .paginate(request.page, request.limit)
        )
        listing = await self._beat_repo.list(spec)

        return Result.ok(paginate_result(
            listing, request.page, request.limit, BeatOutput.from_entity
        ))
