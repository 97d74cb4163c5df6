"""
BootstrapFirstSuperAdminUseCase - Creation du premier SuperAdmin.

Responsabilite unique:
----------------------
Sur une installation vierge, amorcer les roles integres et creer
le premier compte SuperAdmin. Refuse si un SuperAdmin existe deja.

Toute la sequence (verification, amorcage des roles, creation)
s'execute dans un seul UnitOfWork: deux amorcages concurrents ne
peuvent pas tous deux reussir.
"""

from dataclasses import dataclass
from typing import Optional

from backoffice.application.common.result import Result
from backoffice.application.dto.base import to_record
from backoffice.application.dto.user_dto import UserOutput
from backoffice.application.ports.services import ActivityLogger, PasswordHasher
from backoffice.application.use_cases.roles.seed_roles import ensure_built_in_roles
from backoffice.domain.entities import User
from backoffice.domain.exceptions import (
    InvalidValueError,
    SuperAdminAlreadyExistsError,
    UserAlreadyExistsError,
)
from backoffice.domain.ports.unit_of_work import Repositories, UnitOfWork
from backoffice.domain.specification import Specification
from backoffice.domain.value_objects import Email, PhoneNumber
from backoffice.domain.value_objects.role_key import RoleKey


@dataclass
class BootstrapSuperAdminRequest:
    """Donnees du premier SuperAdmin."""
    name: str
    email: str
    password: str
    phone_number: Optional[str] = None
    phone_country_code: Optional[str] = None


class BootstrapFirstSuperAdminUseCase:
    """Use case d'amorcage du premier SuperAdmin."""

    def __init__(
        self,
        unit_of_work: UnitOfWork,
        password_hasher: PasswordHasher,
        activity_logger: ActivityLogger,
    ):
        self._unit_of_work = unit_of_work
        self._password_hasher = password_hasher
        self._activity_logger = activity_logger

    async def execute(self, request: BootstrapSuperAdminRequest) -> Result[UserOutput]:
        try:
            email = Email.from_string(request.email).value
            PhoneNumber.validate_parts(request.phone_number, request.phone_country_code)
        except InvalidValueError as e:
            return Result.fail(e)

        async def work(repos: Repositories) -> Result[UserOutput]:
            super_admin_exists = await repos.users.exists(
                Specification(User).where_equal(
                    "user_roles.role.key", RoleKey.SUPER_ADMIN.value
                )
            )
            if super_admin_exists:
                return Result.fail(SuperAdminAlreadyExistsError())

            if await repos.users.exists(Specification(User).where_equal("email", email)):
                return Result.fail(UserAlreadyExistsError(email))

            roles = await ensure_built_in_roles(repos.roles)
            super_admin = next(r for r in roles if r.key == RoleKey.SUPER_ADMIN.value)

            password_hash = await self._password_hasher.hash(request.password)
            user = User.create(
                name=request.name,
                email=email,
                password_hash=password_hash,
                phone_number=request.phone_number,
                phone_country_code=request.phone_country_code,
                roles=[super_admin],
            )
            created = await repos.users.create(user)
            return Result.ok(UserOutput.from_entity(created))

        result = await self._unit_of_work.execute(work)

        if result.success:
            await self._activity_logger.log_create(
                "user", result.value.id, to_record(result.value)
            )
        return result
