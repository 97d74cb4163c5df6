"""
DTOs de sortie - Utilisateurs, roles, authentification.

Le hash du mot de passe n'est jamais expose.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from backoffice.domain.entities import Role, User


@dataclass(frozen=True)
class RoleOutput:
    id: Optional[int]
    key: str
    name_en: str
    name_ar: str

    @classmethod
    def from_entity(cls, role: Role) -> "RoleOutput":
        return cls(id=role.id, key=role.key, name_en=role.name_en, name_ar=role.name_ar)


@dataclass(frozen=True)
class UserOutput:
    """
    Vue publique d'un utilisateur.

    Attributes:
        roles: Roles charges (vide si la relation n'a pas ete incluse).
    """

    id: str
    name: str
    email: str
    phone_number: Optional[str] = None
    phone_country_code: Optional[str] = None
    roles: list[RoleOutput] = field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def role_keys(self) -> list[str]:
        return [r.key for r in self.roles]

    @classmethod
    def from_entity(cls, user: User) -> "UserOutput":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            phone_number=user.phone_number,
            phone_country_code=user.phone_country_code,
            roles=[
                RoleOutput.from_entity(ur.role)
                for ur in user.user_roles if ur.role is not None
            ],
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


@dataclass(frozen=True)
class LoginOutput:
    """Token d'acces + utilisateur authentifie."""

    access_token: str
    expires_at: datetime
    user: UserOutput


@dataclass(frozen=True)
class UserValidationOutput:
    """Claims d'un token valide."""

    user_id: str
    email: str
    name: str
    roles: list[str] = field(default_factory=list)
