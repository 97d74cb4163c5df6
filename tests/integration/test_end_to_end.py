"""
Tests d'integration de bout en bout: Container + SQLite en memoire.
"""

import pytest

from backoffice.application.use_cases.auth import LoginRequest, ValidateUserRequest
from backoffice.application.use_cases.beats import CreateBeatRequest, ListBeatsRequest
from backoffice.application.use_cases.brands import CreateBrandRequest, UpdateBrandRequest
from backoffice.application.use_cases.influencers import (
    CreateInfluencerRequest,
    SocialPlatformInput,
    UpdateSocialPlatformRequest,
)
from backoffice.application.use_cases.users import (
    AssignRolesRequest,
    BootstrapSuperAdminRequest,
    CreateUserRequest,
    ListUsersRequest,
)
from backoffice.domain.entities import SocialPlatform
from backoffice.domain.specification import Specification
from backoffice.infrastructure.config import Settings
from backoffice.infrastructure.container import Container
from backoffice.infrastructure.persistence import SqlAlchemySocialPlatformRepository


@pytest.fixture
def container(db) -> Container:
    settings = Settings(
        _env_file=None,
        database_url="sqlite+aiosqlite:///:memory:",
        jwt_secret_key="end-to-end-secret-key-of-sufficient-length",
        bcrypt_rounds=4,
    )
    return Container.create(settings=settings, db=db)


# ============================================================
# Authentification et utilisateurs
# ============================================================


class TestAuthFlow:
    """Bootstrap -> login -> validation -> gestion des roles."""

    async def test_bootstrap_login_validate(self, container):
        bootstrap = await container.bootstrap_super_admin.execute(
            BootstrapSuperAdminRequest("Root", "Root@Example.com", "s3cret-pass")
        )
        assert bootstrap.success
        assert bootstrap.value.role_keys == ["SuperAdmin"]

        again = await container.bootstrap_super_admin.execute(
            BootstrapSuperAdminRequest("Other", "other@example.com", "x")
        )
        assert again.code == "SUPER_ADMIN_ALREADY_EXISTS"

        login = await container.login.execute(
            LoginRequest("root@example.com", "s3cret-pass")
        )
        assert login.success

        validation = await container.validate_user.execute(
            ValidateUserRequest(token=login.value.access_token)
        )
        assert validation.value.user_id == bootstrap.value.id
        assert validation.value.roles == ["SuperAdmin"]

        wrong = await container.login.execute(LoginRequest("root@example.com", "nope"))
        assert wrong.code == "INVALID_CREDENTIALS"

    async def test_roles_are_seeded_once(self, container):
        first = await container.seed_roles.execute()
        second = await container.seed_roles.execute()
        listed = await container.list_roles.execute()

        assert [r.id for r in first.value] == [r.id for r in second.value]
        assert [r.key for r in listed.value] == ["SuperAdmin", "Admin", "Executive"]

    async def test_user_management(self, container):
        await container.seed_roles.execute()
        caller = ["SuperAdmin"]

        created = await container.create_user.execute(
            CreateUserRequest("Jane Doe", "jane@example.com", "pw", role_keys=["Admin"]),
            caller_roles=caller,
        )
        assert created.value.role_keys == ["Admin"]

        duplicate = await container.create_user.execute(
            CreateUserRequest("Jane Bis", "JANE@example.com", "pw")
        )
        assert duplicate.code == "USER_ALREADY_EXISTS"

        missing_role = await container.assign_roles.execute(
            AssignRolesRequest(created.value.id, ["Executive", "Auditor"]),
            caller_roles=caller,
        )
        assert missing_role.code == "ROLE_NOT_FOUND"
        unchanged = await container.get_user.execute(created.value.id)
        assert unchanged.value.role_keys == ["Admin"]

        assigned = await container.assign_roles.execute(
            AssignRolesRequest(created.value.id, ["Executive", "Admin"]),
            caller_roles=caller,
        )
        assert sorted(assigned.value.role_keys) == ["Admin", "Executive"]

        listing = await container.list_users.execute(ListUsersRequest(search="JANE"))
        assert listing.value.meta.total_filtered == 1

        deleted = await container.delete_user.execute(created.value.id)
        assert deleted.success
        assert (await container.get_user.execute(created.value.id)).code == "USER_NOT_FOUND"


# ============================================================
# Catalogue: influenceurs, marques, beats
# ============================================================


class TestCatalogFlow:
    """Creation, recherche et suppressions protegees."""

    async def _seed(self, container):
        brand = await container.create_brand.execute(CreateBrandRequest("Acme", "أكمي"))
        influencer = await container.create_influencer.execute(CreateInfluencerRequest(
            username="sara",
            email="sara@example.com",
            name_en="Sara",
            name_ar="سارة",
            social_platforms=[
                SocialPlatformInput("instagram", "https://instagram.com/sara", 1200),
            ],
        ))
        beat = await container.create_beat.execute(CreateBeatRequest(
            media_url="https://cdn.example.com/m.mp4",
            thumbnail_url="https://cdn.example.com/t.jpg",
            influencer_id=influencer.value.id,
            brand_id=brand.value.id,
            caption="Summer launch",
        ))
        return brand.value, influencer.value, beat.value

    async def test_beat_listing_and_search(self, container):
        brand, influencer, beat = await self._seed(container)

        assert beat.brand.name_en == "Acme"
        assert beat.influencer.username == "sara"

        by_brand = await container.list_beats.execute(ListBeatsRequest(search="acm"))
        by_user = await container.list_beats.execute(ListBeatsRequest(search="SARA"))
        none = await container.list_beats.execute(ListBeatsRequest(search="globex"))

        assert [b.id for b in by_brand.value.data] == [beat.id]
        assert [b.id for b in by_user.value.data] == [beat.id]
        assert none.value.data == []
        assert none.value.meta.total == 1

    async def test_brand_rename_conflict(self, container):
        brand, _, _ = await self._seed(container)
        other = await container.create_brand.execute(CreateBrandRequest("Globex", "جلوبكس"))

        result = await container.update_brand.execute(
            UpdateBrandRequest(other.value.id, name_en="Acme")
        )
        same = await container.update_brand.execute(
            UpdateBrandRequest(brand.id, name_en="Acme", logo_url="https://x/l.png")
        )

        assert result.code == "BRAND_NAME_ALREADY_EXISTS"
        assert same.success

    async def test_deletes_blocked_by_beats(self, container):
        brand, influencer, beat = await self._seed(container)

        blocked_brand = await container.delete_brand.execute(brand.id)
        blocked_influencer = await container.delete_influencer.execute(influencer.id)

        assert blocked_brand.code == "BRAND_HAS_BEATS"
        assert blocked_influencer.code == "INFLUENCER_HAS_BEATS"

        assert (await container.delete_beat.execute(beat.id)).success
        assert (await container.delete_brand.execute(brand.id)).success

    async def test_influencer_delete_cascades_platforms(self, container, db):
        _, influencer, beat = await self._seed(container)
        await container.delete_beat.execute(beat.id)
        platforms = SqlAlchemySocialPlatformRepository(db=db)

        added = await container.social_platforms.add_or_update(UpdateSocialPlatformRequest(
            influencer.id, "tiktok", url="https://tiktok.com/@sara",
        ))
        assert added.success
        assert await platforms.count() == 2

        result = await container.delete_influencer.execute(influencer.id)

        assert result.success
        assert await platforms.count(
            Specification(SocialPlatform).where_equal("influencer_id", influencer.id)
        ) == 0
