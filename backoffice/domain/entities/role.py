"""
Entite Role - Role attribuable aux utilisateurs du back office.

Un role est identifie par une cle unique (SuperAdmin, Admin,
Executive) et porte un libelle en anglais et en arabe.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from backoffice.domain.value_objects.role_key import RoleDefinition


@dataclass
class Role:
    """
    Role utilisateur.

    Attributes:
        key: Cle unique du role.
        name_en: Libelle anglais.
        name_ar: Libelle arabe.
        id: Identifiant attribue par le stockage.
    """

    key: str
    name_en: str
    name_ar: str
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_definition(cls, definition: RoleDefinition) -> "Role":
        """Cree un role (non persiste) depuis une definition integree."""
        return cls(
            key=definition.key.value,
            name_en=definition.name_en,
            name_ar=definition.name_ar,
        )
