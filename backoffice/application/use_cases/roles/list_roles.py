"""ListRolesUseCase - Liste des roles disponibles."""

from backoffice.application.common.result import Result
from backoffice.application.dto.user_dto import RoleOutput
from backoffice.domain.entities import Role
from backoffice.domain.ports.repository import Repository
from backoffice.domain.specification import Specification


class ListRolesUseCase:
    """Liste tous les roles, tries par ID."""

    def __init__(self, role_repo: Repository[Role, int]):
        self._role_repo = role_repo

    async def execute(self) -> Result[list[RoleOutput]]:
        roles = await self._role_repo.find_many(Specification(Role).order_by("id"))
        return Result.ok([RoleOutput.from_entity(role) for role in roles])
