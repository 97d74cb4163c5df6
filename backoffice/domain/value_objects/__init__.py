"""Value Objects du domaine."""

from backoffice.domain.value_objects.email import Email, normalize_email
from backoffice.domain.value_objects.phone_number import PhoneNumber
from backoffice.domain.value_objects.role_key import (
    BUILT_IN_ROLES,
    RoleDefinition,
    RoleKey,
    has_role,
)

__all__ = [
    "Email",
    "normalize_email",
    "PhoneNumber",
    "RoleKey",
    "RoleDefinition",
    "BUILT_IN_ROLES",
    "has_role",
]
