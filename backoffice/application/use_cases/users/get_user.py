"""GetUserUseCase - Lecture d'un utilisateur par ID."""

from backoffice.application.common.result import Result
from backoffice.application.dto.user_dto import UserOutput
from backoffice.domain.entities import User
from backoffice.domain.exceptions import UserNotFoundError
from backoffice.domain.ports.repository import Repository


class GetUserUseCase:
    """Retourne un utilisateur et ses roles."""

    def __init__(self, user_repo: Repository[User, str]):
        self._user_repo = user_repo

    async def execute(self, user_id: str) -> Result[UserOutput]:
        user = await self._user_repo.find_by_id(user_id, includes=["user_roles.role"])
        if user is None:
            return Result.fail(UserNotFoundError(user_id))
        return Result.ok(UserOutput.from_entity(user))
