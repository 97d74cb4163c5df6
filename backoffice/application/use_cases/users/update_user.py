"""
UpdateUserUseCase - Modification d'un utilisateur.

Responsabilite unique:
----------------------
Mettre a jour le profil (nom, email, telephone) et, si fourni,
le mot de passe. Les champs a None sont inchanges.

Regles:
-------
- Email ou telephone mal forme -> INVALID_* (avant toute lecture)
- Utilisateur inexistant -> USER_NOT_FOUND
- Nouvel email deja pris par UN AUTRE utilisateur -> USER_ALREADY_EXISTS
  (conserver son propre email n'est pas un conflit)

Lecture, verification et ecriture dans un seul UnitOfWork.
"""

from dataclasses import dataclass
from typing import Optional

from backoffice.application.common.result import Result
from backoffice.application.dto.base import to_record
from backoffice.application.dto.user_dto import UserOutput
from backoffice.application.ports.services import ActivityLogger, PasswordHasher
from backoffice.domain.entities import User
from backoffice.domain.exceptions import (
    InvalidValueError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from backoffice.domain.ports.unit_of_work import Repositories, UnitOfWork
from backoffice.domain.specification import Specification
from backoffice.domain.value_objects import Email, PhoneNumber


@dataclass
class UpdateUserRequest:
    """
    Requete de modification.

    Attributes:
        user_id: ID de l'utilisateur.
        password: Nouveau mot de passe en clair (optionnel).
    """
    user_id: str
    name: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None
    phone_country_code: Optional[str] = None
    password: Optional[str] = None


class UpdateUserUseCase:
    """Use case de modification utilisateur."""

    def __init__(
        self,
        unit_of_work: UnitOfWork,
        password_hasher: PasswordHasher,
        activity_logger: ActivityLogger,
    ):
        self._unit_of_work = unit_of_work
        self._password_hasher = password_hasher
        self._activity_logger = activity_logger

    async def execute(self, request: UpdateUserRequest) -> Result[UserOutput]:
        try:
            new_email = Email.from_string(request.email).value if request.email else None
            PhoneNumber.validate_parts(request.phone_number, request.phone_country_code)
        except InvalidValueError as e:
            return Result.fail(e)

        before: dict = {}

        async def work(repos: Repositories) -> Result[UserOutput]:
            user = await repos.users.find_by_id(
                request.user_id, includes=["user_roles.role"]
            )
            if user is None:
                return Result.fail(UserNotFoundError(request.user_id))

            before.update(to_record(UserOutput.from_entity(user)))

            if new_email and new_email != user.email:
                taken = await repos.users.exists(
                    Specification(User)
                    .where_equal("email", new_email)
                    .where_not_equal("id", user.id)
                )
                if taken:
                    return Result.fail(UserAlreadyExistsError(new_email))

            user.update_profile(
                name=request.name,
                email=new_email,
                phone_number=request.phone_number,
                phone_country_code=request.phone_country_code,
            )
            if request.password:
                user.password_hash = await self._password_hasher.hash(request.password)

            updated = await repos.users.update(user)
            return Result.ok(UserOutput.from_entity(updated))

        result = await self._unit_of_work.execute(work)

        if result.success:
            await self._activity_logger.log_update(
                "user", result.value.id, before, to_record(result.value)
            )
        return result
