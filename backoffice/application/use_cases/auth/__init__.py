"""
Use Cases d'authentification.

Use Cases:
----------
- LoginUseCase: Connexion email/mot de passe, emission du token
- ValidateUserUseCase: Validation d'un utilisateur authentifie
"""

from backoffice.application.use_cases.auth.login import LoginRequest, LoginUseCase
from backoffice.application.use_cases.auth.validate_user import (
    ValidateUserRequest,
    ValidateUserUseCase,
)

__all__ = [
    "LoginUseCase",
    "LoginRequest",
    "ValidateUserUseCase",
    "ValidateUserRequest",
]
