"""
Value Object RoleKey - Cles des roles integres.

Roles disponibles:
------------------
- SuperAdmin: Gestion des roles et des autres administrateurs
- Admin: Gestion du contenu (influenceurs, marques, beats)
- Executive: Consultation et operations courantes

Ces trois roles existent toujours (amorces par SeedRolesUseCase
ou BootstrapFirstSuperAdminUseCase).
"""

from dataclasses import dataclass
from enum import Enum


class RoleKey(str, Enum):
    """Cles des roles integres."""

    SUPER_ADMIN = "SuperAdmin"
    ADMIN = "Admin"
    EXECUTIVE = "Executive"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class RoleDefinition:
    """Nom d'affichage bilingue d'un role integre."""

    key: RoleKey
    name_en: str
    name_ar: str


BUILT_IN_ROLES: tuple[RoleDefinition, ...] = (
    RoleDefinition(RoleKey.SUPER_ADMIN, "Super Admin", "مشرف عام"),
    RoleDefinition(RoleKey.ADMIN, "Admin", "مشرف"),
    RoleDefinition(RoleKey.EXECUTIVE, "Executive", "تنفيذي"),
)


def has_role(role_keys, required: RoleKey) -> bool:
    """True si `required` figure parmi les cles fournies."""
    return any(getattr(key, "value", key) == required.value for key in role_keys or ())
