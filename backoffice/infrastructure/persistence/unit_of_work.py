"""
SqlAlchemyUnitOfWork - Adapter SQLAlchemy du port UnitOfWork.

Ouvre une session et une transaction, fournit au travail des
repositories lies a cette session, puis:
- commit si le travail retourne normalement (meme un Result en echec)
- rollback et re-leve l'exception sinon

Chaque execution est taguee dans les logs (uow_id).
"""

from typing import Awaitable, Callable, TypeVar
from uuid import uuid4

from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.domain.ports.unit_of_work import Repositories, UnitOfWork
from backoffice.infrastructure.config import ZeroLimitPolicy
from backoffice.infrastructure.logging import get_logger, log_context
from backoffice.infrastructure.persistence.database import DatabaseManager
from backoffice.infrastructure.persistence.repositories import (
    SqlAlchemyBeatRepository,
    SqlAlchemyBrandRepository,
    SqlAlchemyInfluencerRepository,
    SqlAlchemyRoleRepository,
    SqlAlchemySocialPlatformRepository,
    SqlAlchemyUserRepository,
)

logger = get_logger(__name__)

T = TypeVar("T")


class SqlAlchemyUnitOfWork(UnitOfWork):
    """
    Unit of Work SQLAlchemy.

    Example:
        >>> uow = SqlAlchemyUnitOfWork(db)
        >>> async def work(repos):
        ...     return await repos.brands.create(brand)
        >>> brand = await uow.execute(work)
    """

    def __init__(
        self,
        db: DatabaseManager,
        zero_limit: ZeroLimitPolicy = ZeroLimitPolicy.EMPTY,
    ):
        self._db = db
        self._zero_limit = zero_limit

    def _repositories(self, session: AsyncSession) -> Repositories:
        options = {"session": session, "zero_limit": self._zero_limit}
        return Repositories(
            users=SqlAlchemyUserRepository(**options),
            roles=SqlAlchemyRoleRepository(**options),
            influencers=SqlAlchemyInfluencerRepository(**options),
            social_platforms=SqlAlchemySocialPlatformRepository(**options),
            brands=SqlAlchemyBrandRepository(**options),
            beats=SqlAlchemyBeatRepository(**options),
        )

    async def execute(self, work: Callable[[Repositories], Awaitable[T]]) -> T:
        with log_context(uow_id=uuid4().hex[:12]):
            async with self._db.session_factory() as session:
                transaction = await session.begin()
                try:
                    result = await work(self._repositories(session))
                except Exception as e:
                    await transaction.rollback()
                    logger.warning(
                        "unit_of_work_rolled_back",
                        error_type=type(e).__name__,
                        error=str(e),
                    )
                    raise
                await transaction.commit()
                logger.debug("unit_of_work_committed")
                return result
