"""
Verification des roles de l'appelant.

Le contexte d'autorisation (cles de roles de l'appelant) est
toujours passe explicitement aux use cases privilegies.
"""

from typing import Iterable, Optional

from backoffice.domain.exceptions import InsufficientPermissionsError
from backoffice.domain.value_objects.role_key import RoleKey, has_role


def check_role(
    caller_roles: Optional[Iterable[str]], required: RoleKey
) -> Optional[InsufficientPermissionsError]:
    """
    Retourne une erreur si `required` ne figure pas dans les roles
    de l'appelant, None sinon.
    """
    if has_role(caller_roles, required):
        return None
    return InsufficientPermissionsError(required.value)
