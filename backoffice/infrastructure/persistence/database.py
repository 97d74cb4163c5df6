"""
Gestion de la connexion a la base de donnees (SQLAlchemy async).

Fournit DatabaseManager: moteur async, factory de sessions et
context manager transactionnel (commit/rollback automatiques).

Connection Pooling:
-------------------
Pour PostgreSQL (asyncpg):
- pool_size=5: Connexions maintenues en permanence
- max_overflow=10: Connexions temporaires supplementaires
- pool_recycle=1800: Recyclage toutes les 30 min
- pool_pre_ping=True: Verification avant utilisation

Pour SQLite (aiosqlite, tests): StaticPool et cles etrangeres
activees a chaque connexion (PRAGMA foreign_keys=ON).
"""
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from backoffice.infrastructure.config import Settings, get_settings
from backoffice.infrastructure.logging import get_logger
from backoffice.infrastructure.persistence.models import Base

logger = get_logger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class DatabaseManager:
    """
    Gestionnaire central de connexion a la base de donnees.

    Attributes:
        engine: Moteur SQLAlchemy async
        session_factory: Factory de sessions (expire_on_commit=False)

    Example:
        >>> db = DatabaseManager("sqlite+aiosqlite:///:memory:")
        >>> await db.create_tables()
        >>> async with db.get_session() as session:
        ...     await session.execute(select(UserModel))
        # Commit automatique si pas d'exception
        # Rollback automatique en cas d'erreur
    """

    def __init__(
        self,
        database_url: Optional[str] = None,
        echo: bool = False,
        pool_size: int = 5,
        max_overflow: int = 10,
    ):
        if database_url is None:
            database_url = get_settings().database_url

        self.database_url = database_url
        self.is_sqlite = database_url.startswith("sqlite")

        if self.is_sqlite:
            self.engine: AsyncEngine = create_async_engine(
                database_url,
                echo=echo,
                poolclass=StaticPool,
                connect_args={"check_same_thread": False},
            )
            event.listen(self.engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
        else:
            self.engine = create_async_engine(
                database_url,
                echo=echo,
                pool_pre_ping=True,
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_timeout=30,
                pool_recycle=1800,
            )

        self.session_factory = async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "DatabaseManager":
        """Construit le gestionnaire a partir de la configuration."""
        settings = settings or get_settings()
        return cls(
            database_url=settings.database_url,
            echo=settings.database_echo,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )

    async def create_tables(self) -> None:
        """Cree toutes les tables si elles n'existent pas."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("database_tables_created", tables=sorted(Base.metadata.tables))

    async def drop_tables(self) -> None:
        """Supprime toutes les tables (tests)."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

    @asynccontextmanager
    async def get_session(self) -> AsyncIterator[AsyncSession]:
        """Context manager pour les sessions avec gestion automatique des transactions."""
        session = self.session_factory()
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def dispose(self) -> None:
        """Ferme toutes les connexions du pool."""
        await self.engine.dispose()
