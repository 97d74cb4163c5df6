"""
DeleteUserUseCase - Suppression d'un utilisateur.

Les affectations de roles sont supprimees en cascade.
"""

from backoffice.application.common.result import Result
from backoffice.application.dto.base import to_record
from backoffice.application.dto.user_dto import UserOutput
from backoffice.application.ports.services import ActivityLogger
from backoffice.domain.entities import User
from backoffice.domain.exceptions import UserNotFoundError
from backoffice.domain.ports.repository import Repository


class DeleteUserUseCase:
    """Use case de suppression utilisateur."""

    def __init__(self, user_repo: Repository[User, str], activity_logger: ActivityLogger):
        self._user_repo = user_repo
        self._activity_logger = activity_logger

    async def execute(self, user_id: str) -> Result[None]:
        user = await self._user_repo.find_by_id(user_id, includes=["user_roles.role"])
        if user is None:
            return Result.fail(UserNotFoundError(user_id))

        await self._user_repo.delete(user_id)

        await self._activity_logger.log_delete(
            "user", user_id, to_record(UserOutput.from_entity(user))
        )
        return Result.ok()
