"""
Repositories SQLAlchemy pour les utilisateurs et les roles.

Un utilisateur est toujours charge avec ses affectations et leurs
roles (user_roles.role): l'agregat est complet, la synchronisation
des affectations ne supprime donc jamais une ligne non chargee.
"""

from backoffice.domain.entities import Role, User
from backoffice.infrastructure.persistence import mappers
from backoffice.infrastructure.persistence.models import RoleModel, UserModel
from backoffice.infrastructure.persistence.repositories.base_repository import (
    SqlAlchemyRepository,
)


class SqlAlchemyUserRepository(SqlAlchemyRepository[User, str, UserModel]):
    """Repository SQLAlchemy pour les utilisateurs."""

    model = UserModel
    entity_type = User
    entity_name = "User"
    default_includes = ("user_roles.role",)

    def _to_entity(self, model: UserModel) -> User:
        return mappers.user_to_entity(model)

    def _to_model(self, entity: User) -> UserModel:
        return mappers.user_to_model(entity)

    def _apply(self, entity: User, model: UserModel) -> None:
        mappers.apply_user(entity, model)


class SqlAlchemyRoleRepository(SqlAlchemyRepository[Role, int, RoleModel]):
    """Repository SQLAlchemy pour les roles."""

    model = RoleModel
    entity_type = Role
    entity_name = "Role"

    def _to_entity(self, model: RoleModel) -> Role:
        return mappers.role_to_entity(model)

    def _to_model(self, entity: Role) -> RoleModel:
        return mappers.role_to_model(entity)

    def _apply(self, entity: Role, model: RoleModel) -> None:
        mappers.apply_role(entity, model)
