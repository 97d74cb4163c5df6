"""
CreateUserUseCase - Creation d'un nouvel utilisateur.

Responsabilite unique:
----------------------
Valider et creer un nouvel utilisateur, avec ses roles eventuels.
Verifier l'unicite de l'email.

Ordre des verifications:
------------------------
1. Autorisation: affecter des roles exige SuperAdmin
2. Format de l'email et du telephone (INVALID_*)
3. Unicite de l'email
4. Existence des roles demandes
5. Hachage du mot de passe et creation

Les etapes 3 a 5 s'executent dans un UnitOfWork.

Creations concurrentes:
-----------------------
La verification d'unicite (etape 3) ne fait qu'echouer tot. Deux
creations simultanees avec le meme email peuvent toutes deux la
passer: la contrainte unique users.email tranche alors. La seconde
leve IntegrityError (non convertie en Result), son UnitOfWork est
annule et aucune affectation de role partielle ne subsiste.

Dependances:
------------
- UnitOfWork: Transaction users + roles
- PasswordHasher: Hacher le mot de passe
- ActivityLogger: Journaliser la creation
"""

from dataclasses import dataclass, field
from typing import Iterable, Optional

from backoffice.application.common.authorization import check_role
from backoffice.application.common.result import Result
from backoffice.application.dto.base import to_record
from backoffice.application.dto.user_dto import UserOutput
from backoffice.application.ports.services import ActivityLogger, PasswordHasher
from backoffice.application.use_cases.users.role_lookup import find_roles_by_keys
from backoffice.domain.entities import User
from backoffice.domain.exceptions import (
    InvalidValueError,
    RoleNotFoundError,
    UserAlreadyExistsError,
)
from backoffice.domain.ports.unit_of_work import Repositories, UnitOfWork
from backoffice.domain.specification import Specification
from backoffice.domain.value_objects import Email, PhoneNumber
from backoffice.domain.value_objects.role_key import RoleKey


@dataclass
class CreateUserRequest:
    """
    Requete de creation utilisateur.

    Attributes:
        name: Nom complet.
        email: Adresse email (unique).
        password: Mot de passe en clair.
        phone_number: Telephone.
        phone_country_code: Indicatif pays.
        role_keys: Roles a affecter (exige un appelant SuperAdmin).
    """
    name: str
    email: str
    password: str
    phone_number: Optional[str] = None
    phone_country_code: Optional[str] = None
    role_keys: list[str] = field(default_factory=list)


class CreateUserUseCase:
    """
    Use case de creation utilisateur.

    Example:
        >>> use_case = CreateUserUseCase(uow, hasher, activity_logger)
        >>> request = CreateUserRequest("John", "john@ex.com", "pass123", role_keys=["Admin"])
        >>> result = await use_case.execute(request, caller_roles=["SuperAdmin"])
        >>> if result.success:
        ...     print(f"Utilisateur {result.value.email} cree")
    """

    def __init__(
        self,
        unit_of_work: UnitOfWork,
        password_hasher: PasswordHasher,
        activity_logger: ActivityLogger,
    ):
        self._unit_of_work = unit_of_work
        self._password_hasher = password_hasher
        self._activity_logger = activity_logger

    async def execute(
        self,
        request: CreateUserRequest,
        caller_roles: Optional[Iterable[str]] = None,
    ) -> Result[UserOutput]:
        """
        Execute la creation.

        Args:
            request: Donnees utilisateur.
            caller_roles: Cles de roles de l'appelant.

        Returns:
            Result avec UserOutput.
        """
        if request.role_keys:
            denied = check_role(caller_roles, RoleKey.SUPER_ADMIN)
            if denied:
                return Result.fail(denied)

        try:
            email = Email.from_string(request.email).value
            PhoneNumber.validate_parts(request.phone_number, request.phone_country_code)
        except InvalidValueError as e:
            return Result.fail(e)

        async def work(repos: Repositories) -> Result[UserOutput]:
            if await repos.users.exists(Specification(User).where_equal("email", email)):
                return Result.fail(UserAlreadyExistsError(email))

            roles, missing = await find_roles_by_keys(repos.roles, request.role_keys)
            if missing:
                return Result.fail(RoleNotFoundError(missing))

            password_hash = await self._password_hasher.hash(request.password)
            user = User.create(
                name=request.name,
                email=email,
                password_hash=password_hash,
                phone_number=request.phone_number,
                phone_country_code=request.phone_country_code,
                roles=roles,
            )
            created = await repos.users.create(user)
            return Result.ok(UserOutput.from_entity(created))

        result = await self._unit_of_work.execute(work)

        if result.success:
            await self._activity_logger.log_create(
                "user", result.value.id, to_record(result.value)
            )
        return result
