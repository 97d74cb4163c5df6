"""
SeedRolesUseCase - Amorcage des roles integres.

Responsabilite unique:
----------------------
Garantir l'existence des roles SuperAdmin, Admin et Executive
(operation idempotente: cree les manquants, met a jour les
libelles modifies, ne touche pas aux autres roles).
"""

from backoffice.application.common.result import Result
from backoffice.application.dto.user_dto import RoleOutput
from backoffice.domain.entities import Role
from backoffice.domain.ports.repository import Repository
from backoffice.domain.ports.unit_of_work import Repositories, UnitOfWork
from backoffice.domain.specification import Specification
from backoffice.domain.value_objects.role_key import BUILT_IN_ROLES


async def ensure_built_in_roles(role_repo: Repository[Role, int]) -> list[Role]:
    """
    Cree ou met a jour les roles integres.

    Args:
        role_repo: Repository des roles (idealement lie a un UnitOfWork).

    Returns:
        Les roles integres, dans l'ordre de BUILT_IN_ROLES.
    """
    keys = [definition.key.value for definition in BUILT_IN_ROLES]
    existing = await role_repo.find_many(Specification(Role).where_in("key", keys))
    by_key = {role.key: role for role in existing}

    roles: list[Role] = []
    for definition in BUILT_IN_ROLES:
        role = by_key.get(definition.key.value)
        if role is None:
            role = await role_repo.create(Role.from_definition(definition))
        elif (role.name_en, role.name_ar) != (definition.name_en, definition.name_ar):
            role.name_en = definition.name_en
            role.name_ar = definition.name_ar
            role = await role_repo.update(role)
        roles.append(role)
    return roles


class SeedRolesUseCase:
    """
    Use case d'amorcage des roles.

    Example:
        >>> result = await SeedRolesUseCase(unit_of_work).execute()
        >>> [r.key for r in result.value]
        ['SuperAdmin', 'Admin', 'Executive']
    """

    def __init__(self, unit_of_work: UnitOfWork):
        self._unit_of_work = unit_of_work

    async def execute(self) -> Result[list[RoleOutput]]:
        async def work(repos: Repositories) -> list[Role]:
            return await ensure_built_in_roles(repos.roles)

        roles = await self._unit_of_work.execute(work)
        return Result.ok([RoleOutput.from_entity(role) for role in roles])
