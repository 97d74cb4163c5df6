"""
AssignRolesUseCase - Affectation des roles d'un utilisateur.

Responsabilite unique:
----------------------
Remplacer l'ensemble des roles d'un utilisateur.

Ordre des verifications:
------------------------
1. Autorisation: l'appelant doit etre SuperAdmin
2. Existence de l'utilisateur
3. Existence de toutes les cles de roles

En cas d'echec, les affectations existantes sont inchangees.
"""

from dataclasses import dataclass, field
from typing import Iterable, Optional

from backoffice.application.common.authorization import check_role
from backoffice.application.common.result import Result
from backoffice.application.dto.base import to_record
from backoffice.application.dto.user_dto import UserOutput
from backoffice.application.ports.services import ActivityLogger
from backoffice.application.use_cases.users.role_lookup import find_roles_by_keys
from backoffice.domain.exceptions import RoleNotFoundError, UserNotFoundError
from backoffice.domain.ports.unit_of_work import Repositories, UnitOfWork
from backoffice.domain.value_objects.role_key import RoleKey


@dataclass
class AssignRolesRequest:
    user_id: str
    role_keys: list[str] = field(default_factory=list)


class AssignRolesUseCase:
    """
    Use case d'affectation de roles.

    Example:
        >>> result = await use_case.execute(
        ...     AssignRolesRequest(user_id, ["Admin", "Executive"]),
        ...     caller_roles=["SuperAdmin"],
        ... )
        >>> sorted(result.value.role_keys)
        ['Admin', 'Executive']
    """

    def __init__(self, unit_of_work: UnitOfWork, activity_logger: ActivityLogger):
        self._unit_of_work = unit_of_work
        self._activity_logger = activity_logger

    async def execute(
        self,
        request: AssignRolesRequest,
        caller_roles: Optional[Iterable[str]] = None,
    ) -> Result[UserOutput]:
        denied = check_role(caller_roles, RoleKey.SUPER_ADMIN)
        if denied:
            return Result.fail(denied)

        before: dict = {}

        async def work(repos: Repositories) -> Result[UserOutput]:
            user = await repos.users.find_by_id(
                request.user_id, includes=["user_roles.role"]
            )
            if user is None:
                return Result.fail(UserNotFoundError(request.user_id))

            before.update(to_record(UserOutput.from_entity(user)))

            roles, missing = await find_roles_by_keys(repos.roles, request.role_keys)
            if missing:
                return Result.fail(RoleNotFoundError(missing))

            user.assign_roles(roles)
            updated = await repos.users.update(user)
            return Result.ok(UserOutput.from_entity(updated))

        result = await self._unit_of_work.execute(work)

        if result.success:
            await self._activity_logger.log_update(
                "user", result.value.id, before, to_record(result.value)
            )
        return result
