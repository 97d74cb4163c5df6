"""
Configuration et fixtures pytest.
"""

import sys
from pathlib import Path
from unittest.mock import AsyncMock

import pytest

# Ajouter le repertoire racine au path
sys.path.insert(0, str(Path(__file__).parent.parent))

from backoffice.domain.entities import (
    Beat,
    Brand,
    Influencer,
    Role,
    SocialPlatform,
    User,
    UserRole,
)
from backoffice.domain.ports.repository import ListResult
from backoffice.domain.ports.unit_of_work import Repositories, UnitOfWork
from backoffice.infrastructure.persistence import DatabaseManager


class FakeUnitOfWork(UnitOfWork):
    """UnitOfWork en memoire: execute le travail avec des repositories mockes."""

    def __init__(self, repos: Repositories):
        self.repos = repos
        self.executions = 0

    async def execute(self, work):
        self.executions += 1
        return await work(self.repos)


def make_repository() -> AsyncMock:
    """Repository mocke avec des reponses neutres par defaut."""
    repo = AsyncMock()
    repo.find_many.return_value = []
    repo.find_one.return_value = None
    repo.find_by_id.return_value = None
    repo.count.return_value = 0
    repo.exists.return_value = False
    repo.list.return_value = ListResult(items=[], total=0, total_filtered=0)
    repo.create.side_effect = lambda entity: entity
    repo.update.side_effect = lambda entity: entity
    repo.delete.return_value = None
    return repo


# ═══════════════════════════════════════════════════════════════════════════════
# FIXTURES - PORTS MOCKES
# ═══════════════════════════════════════════════════════════════════════════════

@pytest.fixture
def repos() -> Repositories:
    """Un repository mocke par entite."""
    return Repositories(
        users=make_repository(),
        roles=make_repository(),
        influencers=make_repository(),
        social_platforms=make_repository(),
        brands=make_repository(),
        beats=make_repository(),
    )


@pytest.fixture
def unit_of_work(repos: Repositories) -> FakeUnitOfWork:
    return FakeUnitOfWork(repos)


@pytest.fixture
def password_hasher() -> AsyncMock:
    """Hasher mocke: hash("x") == "hashed:x"."""
    hasher = AsyncMock()
    hasher.hash.side_effect = lambda plain: f"hashed:{plain}"
    hasher.compare.side_effect = lambda plain, hashed: hashed == f"hashed:{plain}"
    return hasher


@pytest.fixture
def activity_logger() -> AsyncMock:
    return AsyncMock()


# ═══════════════════════════════════════════════════════════════════════════════
# FIXTURES - ENTITIES
# ═══════════════════════════════════════════════════════════════════════════════

@pytest.fixture
def super_admin_role() -> Role:
    return Role(id=1, key="SuperAdmin", name_en="Super Admin", name_ar="مشرف عام")


@pytest.fixture
def admin_role() -> Role:
    return Role(id=2, key="Admin", name_en="Admin", name_ar="مشرف")


@pytest.fixture
def executive_role() -> Role:
    return Role(id=3, key="Executive", name_en="Executive", name_ar="تنفيذي")


@pytest.fixture
def sample_user(admin_role: Role) -> User:
    """Utilisateur Admin avec mot de passe 'secret'."""
    return User(
        id="7b1f3c1e-0000-4000-8000-000000000001",
        name="Jane Doe",
        email="jane@example.com",
        password_hash="hashed:secret",
        user_roles=[UserRole(role_id=admin_role.id, role=admin_role)],
    )


@pytest.fixture
def sample_influencer() -> Influencer:
    return Influencer(
        id=10,
        username="sara",
        email="sara@example.com",
        name_en="Sara",
        name_ar="سارة",
        social_platforms=[
            SocialPlatform(id=100, key="instagram", url="https://instagram.com/sara",
                           number_of_followers=1200, influencer_id=10),
        ],
    )


@pytest.fixture
def sample_brand() -> Brand:
    return Brand(
        id=20,
        name_en="Acme",
        name_ar="أكمي",
        logo_url="https://cdn.example.com/acme.png",
        website_url="https://acme.example.com",
    )


@pytest.fixture
def sample_beat(sample_influencer: Influencer, sample_brand: Brand) -> Beat:
    return Beat(
        id=30,
        media_url="https://cdn.example.com/beat.mp4",
        thumbnail_url="https://cdn.example.com/beat.jpg",
        status_key="active",
        influencer_id=sample_influencer.id,
        brand_id=sample_brand.id,
        caption="Summer launch",
        influencer=sample_influencer,
        brand=sample_brand,
    )


# ═══════════════════════════════════════════════════════════════════════════════
# FIXTURES - BASE DE DONNEES (integration)
# ═══════════════════════════════════════════════════════════════════════════════

@pytest.fixture
async def db() -> DatabaseManager:
    """Base SQLite en memoire, tables creees."""
    manager = DatabaseManager("sqlite+aiosqlite:///:memory:")
    await manager.create_tables()
    yield manager
    await manager.dispose()
