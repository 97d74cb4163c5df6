"""
Use Cases des utilisateurs.

Use Cases:
----------
- CreateUserUseCase: Creation (roles reserves au SuperAdmin)
- BootstrapFirstSuperAdminUseCase: Premier SuperAdmin
- ListUsersUseCase / GetUserUseCase: Lecture
- UpdateUserUseCase: Modification du profil et du mot de passe
- AssignRolesUseCase: Affectation des roles (SuperAdmin)
- DeleteUserUseCase: Suppression
"""

from backoffice.application.use_cases.users.assign_roles import (
    AssignRolesRequest,
    AssignRolesUseCase,
)
from backoffice.application.use_cases.users.bootstrap_first_superadmin import (
    BootstrapFirstSuperAdminUseCase,
    BootstrapSuperAdminRequest,
)
from backoffice.application.use_cases.users.create_user import (
    CreateUserRequest,
    CreateUserUseCase,
)
from backoffice.application.use_cases.users.delete_user import DeleteUserUseCase
from backoffice.application.use_cases.users.get_user import GetUserUseCase
from backoffice.application.use_cases.users.list_users import (
    ListUsersRequest,
    ListUsersUseCase,
)
from backoffice.application.use_cases.users.update_user import (
    UpdateUserRequest,
    UpdateUserUseCase,
)

__all__ = [
    "CreateUserUseCase",
    "CreateUserRequest",
    "BootstrapFirstSuperAdminUseCase",
    "BootstrapSuperAdminRequest",
    "ListUsersUseCase",
    "ListUsersRequest",
    "GetUserUseCase",
    "UpdateUserUseCase",
    "UpdateUserRequest",
    "AssignRolesUseCase",
    "AssignRolesRequest",
    "DeleteUserUseCase",
]
