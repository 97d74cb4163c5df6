"""Use Cases des roles."""

from backoffice.application.use_cases.roles.list_roles import ListRolesUseCase
from backoffice.application.use_cases.roles.seed_roles import (
    SeedRolesUseCase,
    ensure_built_in_roles,
)

__all__ = ["SeedRolesUseCase", "ListRolesUseCase", "ensure_built_in_roles"]
