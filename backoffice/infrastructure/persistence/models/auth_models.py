"""
Modeles SQLAlchemy pour les utilisateurs et les roles.

Tables:
-------
- users: Detenteurs de compte
- roles: Roles (cle unique)
- user_roles: Affectations (user_id, role_id) uniques

Integrite:
----------
- users.email unique
- Supprimer un utilisateur supprime ses affectations (ON DELETE CASCADE)
- Un role affecte ne peut pas etre supprime (ON DELETE RESTRICT)
"""
from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship

from backoffice.infrastructure.persistence.models.base import Base, utcnow


class UserModel(Base):
    """
    Table users - Utilisateurs du back office.

    Colonnes:
        id: UUID (chaine) genere cote client
        name: Nom complet
        email: Adresse email (unique)
        password_hash: Hash bcrypt du mot de passe
        phone_number / phone_country_code: Telephone
        created_at / updated_at: Horodatages
    """
    __tablename__ = "users"

    id = Column(String(36), primary_key=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=True)
    phone_number = Column(String(32), nullable=True)
    phone_country_code = Column(String(8), nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False
    )

    user_roles = relationship(
        "UserRoleModel",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="raise",
    )


class RoleModel(Base):
    """
    Table roles - Roles attribuables.

    Colonnes:
        id: Identifiant auto-incremente
        key: Cle stable (SuperAdmin, Admin, Executive)
        name_en / name_ar: Libelles
    """
    __tablename__ = "roles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    key = Column(String(50), unique=True, nullable=False, index=True)
    name_en = Column(String(100), nullable=False)
    name_ar = Column(String(100), nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False
    )


class UserRoleModel(Base):
    """Table user_roles - Affectation d'un role a un utilisateur."""
    __tablename__ = "user_roles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    role_id = Column(
        Integer, ForeignKey("roles.id", ondelete="RESTRICT"), nullable=False
    )

    user = relationship("UserModel", back_populates="user_roles", lazy="raise")
    role = relationship("RoleModel", lazy="raise")

    __table_args__ = (
        UniqueConstraint("user_id", "role_id", name="uq_user_roles_user_role"),
        Index("idx_user_roles_role", "role_id"),
    )
