"""
Entite User - Detenteur de compte du back office.

Represente un utilisateur avec ses affectations de roles.

Attributes:
-----------
- id: Identifiant UUID (chaine) genere cote client
- name: Nom complet
- email: Adresse email (unique)
- password_hash: Hash bcrypt du mot de passe
- phone_number / phone_country_code: Telephone optionnel
- user_roles: Affectations de roles (possedees par l'utilisateur)

Securite:
---------
Le hash est produit par le port PasswordHasher, jamais ici.
L'entite ne connait pas l'algorithme.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, Optional
from uuid import uuid4

from backoffice.domain.entities.role import Role
from backoffice.domain.value_objects.email import Email
from backoffice.domain.value_objects.phone_number import PhoneNumber
from backoffice.domain.value_objects.role_key import RoleKey, has_role


@dataclass
class UserRole:
    """
    Affectation d'un role a un utilisateur.

    Attributes:
        role_id: ID du role affecte.
        user_id: ID de l'utilisateur.
        role: Role charge (si la relation a ete incluse).
        id: Identifiant attribue par le stockage.
    """

    role_id: int
    user_id: Optional[str] = None
    role: Optional[Role] = None
    id: Optional[int] = None


@dataclass
class User:
    """
    Utilisateur du back office.

    Example:
        >>> user = User.create(name="Jane", email="jane@example.com",
        ...                    password_hash="$2b$12$...")
        >>> user.assign_roles([admin_role])
        >>> user.role_keys
        ['Admin']
    """

    name: str
    email: str
    id: str = field(default_factory=lambda: str(uuid4()))
    password_hash: Optional[str] = None
    phone_number: Optional[str] = None
    phone_country_code: Optional[str] = None
    user_roles: list[UserRole] = field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def create(
        cls,
        name: str,
        email: str,
        password_hash: Optional[str] = None,
        phone_number: Optional[str] = None,
        phone_country_code: Optional[str] = None,
        roles: Iterable[Role] = (),
    ) -> "User":
        """
        Factory pour creer un nouvel utilisateur (non persiste).

        Args:
            name: Nom complet.
            email: Adresse email (normalisee en minuscules).
            password_hash: Hash deja calcule du mot de passe.
            phone_number: Numero de telephone.
            phone_country_code: Indicatif pays.
            roles: Roles a affecter.

        Returns:
            Nouvelle instance User avec un id UUID.

        Raises:
            InvalidEmailError, InvalidPhoneNumberError, InvalidCountryCodeError:
                Si l'email ou le telephone est mal forme.
        """
        PhoneNumber.validate_parts(phone_number, phone_country_code)
        user = cls(
            name=name.strip(),
            email=Email.from_string(email).value,
            password_hash=password_hash,
            phone_number=phone_number,
            phone_country_code=phone_country_code,
        )
        user.assign_roles(roles)
        return user

    @property
    def role_keys(self) -> list[str]:
        """Cles des roles charges."""
        return [ur.role.key for ur in self.user_roles if ur.role is not None]

    def has_role(self, key: RoleKey) -> bool:
        """True si l'utilisateur possede le role."""
        return has_role(self.role_keys, key)

    @property
    def is_super_admin(self) -> bool:
        return self.has_role(RoleKey.SUPER_ADMIN)

    def assign_roles(self, roles: Iterable[Role]) -> None:
        """
        Remplace l'ensemble des roles de l'utilisateur.

        Les doublons (meme id ou meme cle) sont ignores.
        """
        assignments: list[UserRole] = []
        seen: set = set()
        for role in roles:
            marker = role.id if role.id is not None else role.key
            if marker in seen:
                continue
            seen.add(marker)
            assignments.append(UserRole(role_id=role.id, user_id=self.id, role=role))
        self.user_roles = assignments

    def update_profile(
        self,
        name: Optional[str] = None,
        email: Optional[str] = None,
        phone_number: Optional[str] = None,
        phone_country_code: Optional[str] = None,
    ) -> None:
        """
        Met a jour les champs fournis (None = inchange).

        Les valeurs sont validees avant toute modification.
        """
        PhoneNumber.validate_parts(phone_number, phone_country_code)
        new_email = Email.from_string(email).value if email is not None else None
        if name is not None:
            self.name = name.strip()
        if new_email is not None:
            self.email = new_email
        if phone_number is not None:
            self.phone_number = phone_number
        if phone_country_code is not None:
            self.phone_country_code = phone_country_code

