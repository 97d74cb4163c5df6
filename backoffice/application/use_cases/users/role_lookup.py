"""Resolution de cles de roles en entites Role."""

from typing import Iterable

from backoffice.domain.entities import Role
from backoffice.domain.ports.repository import Repository
from backoffice.domain.specification import Specification


async def find_roles_by_keys(
    role_repo: Repository[Role, int], keys: Iterable[str]
) -> tuple[list[Role], list[str]]:
    """
    Charge les roles correspondant aux cles.

    Returns:
        (roles trouves dans l'ordre des cles, cles introuvables).
    """
    wanted = list(dict.fromkeys(getattr(k, "value", k) for k in keys))
    if not wanted:
        return [], []

    found = await role_repo.find_many(Specification(Role).where_in("key", wanted))
    by_key = {role.key: role for role in found}
    missing = [key for key in wanted if key not in by_key]
    return [by_key[key] for key in wanted if key in by_key], missing
