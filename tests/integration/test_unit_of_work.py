"""
Tests d'integration pour SqlAlchemyUnitOfWork.
"""

from unittest.mock import AsyncMock

import pytest
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from backoffice.application.common import Result
from backoffice.application.use_cases.roles import SeedRolesUseCase
from backoffice.application.use_cases.users import CreateUserRequest, CreateUserUseCase
from backoffice.domain.entities import Beat, Brand, Influencer
from backoffice.domain.exceptions import BrandNotFoundError
from backoffice.domain.specification import Specification
from backoffice.infrastructure.persistence import (
    SqlAlchemyBrandRepository,
    SqlAlchemyUnitOfWork,
    SqlAlchemyUserRepository,
)
from backoffice.infrastructure.persistence.models import UserModel, UserRoleModel
from backoffice.infrastructure.security import BcryptPasswordHasher


@pytest.fixture
def uow(db) -> SqlAlchemyUnitOfWork:
    return SqlAlchemyUnitOfWork(db)


@pytest.fixture
def brands(db) -> SqlAlchemyBrandRepository:
    return SqlAlchemyBrandRepository(db=db)


class TestUnitOfWork:
    """Commit / rollback."""

    async def test_commit_on_success(self, uow, brands):
        async def work(repos):
            return await repos.brands.create(Brand(name_en="Acme", name_ar="أكمي"))

        brand = await uow.execute(work)

        assert (await brands.find_by_id(brand.id)).name_en == "Acme"

    async def test_failed_result_still_commits(self, uow, brands):
        async def work(repos):
            await repos.brands.create(Brand(name_en="Acme", name_ar="أكمي"))
            return Result.fail(BrandNotFoundError(1))

        result = await uow.execute(work)

        assert not result.success
        assert await brands.count() == 1

    async def test_rollback_on_exception(self, uow, brands):
        async def work(repos):
            await repos.brands.create(Brand(name_en="Acme", name_ar="أكمي"))
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            await uow.execute(work)

        assert await brands.count() == 0

    async def test_repositories_share_transaction(self, uow):
        async def work(repos):
            brand = await repos.brands.create(Brand(name_en="Acme", name_ar="أكمي"))
            # Visible avant commit dans la meme transaction
            return await repos.brands.exists(
                Specification(Brand).where_equal("id", brand.id)
            )

        assert await uow.execute(work)

    async def test_unique_violation_rolls_back(self, uow, brands):
        await brands.create(Brand(name_en="Acme", name_ar="أكمي"))

        async def work(repos):
            await repos.brands.create(Brand(name_en="Other", name_ar="آخر"))
            await repos.brands.create(Brand(name_en="Acme", name_ar="مختلف"))

        with pytest.raises(IntegrityError):
            await uow.execute(work)

        assert await brands.count() == 1

    async def test_restrict_foreign_key(self, uow, brands):
        async def seed(repos):
            brand = await repos.brands.create(Brand(name_en="Acme", name_ar="أكمي"))
            influencer = await repos.influencers.create(Influencer(
                username="sara", email="sara@example.com", name_en="Sara", name_ar="سارة",
            ))
            await repos.beats.create(Beat(
                media_url="m", thumbnail_url="t", status_key="active",
                influencer_id=influencer.id, brand_id=brand.id,
            ))
            return brand

        brand = await uow.execute(seed)

        async def delete(repos):
            await repos.brands.delete(brand.id)

        with pytest.raises(IntegrityError):
            await uow.execute(delete)

        assert await brands.find_by_id(brand.id) is not None


class TestConcurrentUserCreation:
    """Deux creations du meme email passent toutes deux la verification d'unicite."""

    @pytest.fixture
    async def create_user(self, uow, monkeypatch, activity_logger) -> CreateUserUseCase:
        await SeedRolesUseCase(uow).execute()
        # Simule la course: aucune des deux creations ne voit l'autre
        monkeypatch.setattr(
            SqlAlchemyUserRepository, "exists", AsyncMock(return_value=False)
        )
        return CreateUserUseCase(uow, BcryptPasswordHasher(rounds=4), activity_logger)

    async def test_storage_constraint_rejects_second_creation(self, db, create_user):
        first = await create_user.execute(
            CreateUserRequest(
                "Jane", "jane@example.com", "pass-1", role_keys=["Admin", "Executive"]
            ),
            caller_roles=["SuperAdmin"],
        )
        assert first.success

        with pytest.raises(IntegrityError):
            await create_user.execute(
                CreateUserRequest(
                    "Jane Bis", "JANE@example.com", "pass-2", role_keys=["Executive"]
                ),
                caller_roles=["SuperAdmin"],
            )

        async with db.get_session() as session:
            users = (await session.execute(select(UserModel))).scalars().all()
            user_roles = (await session.execute(select(UserRoleModel))).scalars().all()

        assert [u.name for u in users] == ["Jane"]
        assert len(user_roles) == 2
        assert {ur.user_id for ur in user_roles} == {first.value.id}

    async def test_second_creation_is_not_logged(self, create_user, activity_logger):
        request = CreateUserRequest("Jane", "jane@example.com", "pass-1")
        await create_user.execute(request)

        with pytest.raises(IntegrityError):
            await create_user.execute(request)

        activity_logger.log_create.assert_awaited_once()
