"""
ListUsersUseCase - Liste paginee des utilisateurs.

Recherche optionnelle (OU, insensible a la casse) sur le nom et
l'email. Les roles sont inclus.
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
from backoffice.application.dto.user_dto import UserOutput
from backoffice.domain.entities import User
from backoffice.domain.ports.repository import Repository
from backoffice.domain.specification import SortDirection, Specification


@dataclass
class ListUsersRequest:
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT
    search: Optional[str] = None


class ListUsersUseCase:
    """Use case de listing des utilisateurs."""

    SEARCH_FIELDS = ("name", "email")

    def __init__(self, user_repo: Repository[User, str]):
        self._user_repo = user_repo

    async def execute(
        self, request: Optional[ListUsersRequest] = None
    ) -> Result[PaginatedResult[UserOutput]]:
        request = request or ListUsersRequest()

        spec = (
            Specification(User)
            .search_in(self.SEARCH_FIELDS, request.search)
            .include("user_roles.role")
            .order_by("created_at", SortDirection.DESC)
            .paginate(request.page, request.limit)
        )
        listing = await self._user_repo.list(spec)

        return Result.ok(paginate_result(
            listing, request.page, request.limit, UserOutput.from_entity
        ))
