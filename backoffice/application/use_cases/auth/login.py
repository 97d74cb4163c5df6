"""
LoginUseCase - Authentification par email et mot de passe.

Responsabilite unique:
----------------------
Verifier les identifiants et emettre un token d'acces.

Regles:
-------
- Email inconnu -> USER_NOT_FOUND
- Hash absent ou mot de passe incorrect -> INVALID_CREDENTIALS
- Le signataire de tokens n'est appele qu'apres verification reussie

Dependances:
------------
- Repository[User]: Charger l'utilisateur et ses roles
- PasswordHasher: Comparer le mot de passe
- TokenSigner: Signer le token
- Clock: Calculer l'expiration si le signataire ne la fournit pas
"""

from dataclasses import dataclass
from typing import Optional

from backoffice.application.common.result import Result
from backoffice.application.dto.user_dto import LoginOutput, UserOutput
from backoffice.application.ports.services import Clock, PasswordHasher, TokenSigner
from backoffice.domain.entities import User
from backoffice.domain.exceptions import InvalidCredentialsError, UserNotFoundError
from backoffice.domain.ports.repository import Repository
from backoffice.domain.specification import Specification
from backoffice.domain.value_objects import normalize_email


@dataclass
class LoginRequest:
    """
    Requete de connexion.

    Attributes:
        email: Adresse email.
        password: Mot de passe en clair.
        expires_in: Duree de validite du token (defaut: configuration).
    """
    email: str
    password: str
    expires_in: Optional[str] = None


class LoginUseCase:
    """
    Use case de connexion.

    Example:
        >>> use_case = LoginUseCase(user_repo, hasher, signer, clock)
        >>> result = await use_case.execute(LoginRequest("jane@ex.com", "secret"))
        >>> if result.success:
        ...     print(result.value.access_token)
    """

    DEFAULT_EXPIRES_IN = "1h"

    def __init__(
        self,
        user_repo: Repository[User, str],
        password_hasher: PasswordHasher,
        token_signer: TokenSigner,
        clock: Clock,
        default_expires_in: str = DEFAULT_EXPIRES_IN,
    ):
        self._user_repo = user_repo
        self._password_hasher = password_hasher
        self._token_signer = token_signer
        self._clock = clock
        self._default_expires_in = default_expires_in

    async def execute(self, request: LoginRequest) -> Result[LoginOutput]:
        """
        Execute la connexion.

        Args:
            request: Identifiants.

        Returns:
            Result avec LoginOutput (token, expiration, utilisateur).
        """
        email = normalize_email(request.email)
        spec = (
            Specification(User)
            .where_equal("email", email)
            .include("user_roles.role")
        )
        user = await self._user_repo.find_one(spec)
        if user is None:
            return Result.fail(UserNotFoundError(email))

        if not user.password_hash:
            return Result.fail(InvalidCredentialsError())

        if not await self._password_hasher.compare(request.password, user.password_hash):
            return Result.fail(InvalidCredentialsError())

        expires_in = request.expires_in or self._default_expires_in
        signed = await self._token_signer.sign(
            {
                "sub": user.id,
                "email": user.email,
                "name": user.name,
                "roles": user.role_keys,
            },
            expires_in,
        )

        # Repli si le signataire ne connait pas l'expiration
        expires_at = signed.expires_at or self._clock.add_duration(
            self._clock.now(), expires_in
        )

        return Result.ok(LoginOutput(
            access_token=signed.token,
            expires_at=expires_at,
            user=UserOutput.from_entity(user),
        ))
