"""
ValidateUserUseCase - Validation d'un utilisateur authentifie.

Responsabilite unique:
----------------------
A partir d'un token (verifie ici) ou d'un ID utilisateur deja
extrait d'un token, verifier que l'utilisateur existe toujours
et retourner ses roles courants (lus en base, pas dans le token).
"""

from dataclasses import dataclass
from typing import Optional

from backoffice.application.common.result import Result
from backoffice.application.dto.user_dto import UserValidationOutput
from backoffice.application.ports.services import TokenSigner, TokenVerificationError
from backoffice.domain.entities import User
from backoffice.domain.exceptions import InvalidCredentialsError, UserNotFoundError
from backoffice.domain.ports.repository import Repository
from backoffice.domain.specification import Specification


@dataclass
class ValidateUserRequest:
    """
    Requete de validation.

    Attributes:
        user_id: ID deja extrait d'un token verifie.
        token: Token brut a verifier (prioritaire sur user_id).
    """
    user_id: Optional[str] = None
    token: Optional[str] = None


class ValidateUserUseCase:
    """Use case de validation d'utilisateur."""

    def __init__(
        self,
        user_repo: Repository[User, str],
        token_signer: Optional[TokenSigner] = None,
    ):
        self._user_repo = user_repo
        self._token_signer = token_signer

    async def execute(self, request: ValidateUserRequest) -> Result[UserValidationOutput]:
        user_id = request.user_id

        if request.token is not None:
            if self._token_signer is None:
                raise RuntimeError("Aucun TokenSigner configure pour verifier le token")
            try:
                claims = await self._token_signer.verify(request.token)
            except TokenVerificationError:
                return Result.fail(InvalidCredentialsError())
            user_id = claims.get("sub")

        if not user_id:
            return Result.fail(UserNotFoundError())

        user = await self._user_repo.find_one(
            Specification(User)
            .where_equal("id", user_id)
            .include("user_roles.role")
        )
        if user is None:
            return Result.fail(UserNotFoundError(user_id))

        return Result.ok(UserValidationOutput(
            user_id=user.id,
            email=user.email,
            name=user.name,
            roles=user.role_keys,
        ))
