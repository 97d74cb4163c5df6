"""
Port UnitOfWork - Frontiere transactionnelle.

Responsabilite unique:
----------------------
Executer un travail (coroutine) avec un ensemble de repositories
partageant une seule transaction.

Contrat:
--------
- Retour normal de `work` (y compris un Result en echec): commit,
  puis la valeur est retournee.
- Exception dans `work`: rollback, puis l'exception est re-levee.
- Les repositories fournis ne doivent pas etre conserves apres la
  fin de `execute`.

Usage:
------
    async def work(repos: Repositories) -> Result[UserOutput]:
        if await repos.users.exists(spec):
            return Result.fail(UserAlreadyExistsError(email))
        return Result.ok(await repos.users.create(user))

    result = await unit_of_work.execute(work)
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Awaitable, Callable, TypeVar

from backoffice.domain.entities import (
    Beat,
    Brand,
    Influencer,
    Role,
    SocialPlatform,
    User,
)
from backoffice.domain.ports.repository import Repository

T = TypeVar("T")


@dataclass(frozen=True)
class Repositories:
    """Un repository par entite, lies a la transaction courante."""

    users: Repository[User, str]
    roles: Repository[Role, int]
    influencers: Repository[Influencer, int]
    social_platforms: Repository[SocialPlatform, int]
    brands: Repository[Brand, int]
    beats: Repository[Beat, int]


class UnitOfWork(ABC):
    """Interface Unit of Work."""

    @abstractmethod
    async def execute(self, work: Callable[[Repositories], Awaitable[T]]) -> T:
        """Execute `work` dans une transaction unique."""
        ...
