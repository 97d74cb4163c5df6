"""
Tests d'integration pour les repositories SQLAlchemy (SQLite en memoire).
"""

import pytest

from backoffice.domain.entities import (
    Beat,
    Brand,
    Influencer,
    Role,
    SocialPlatform,
    User,
)
from backoffice.domain.ports.repository import RecordNotFoundError
from backoffice.domain.specification import (
    InvalidPaginationError,
    SortDirection,
    Specification,
)
from backoffice.infrastructure.config import ZeroLimitPolicy
from backoffice.infrastructure.persistence import (
    SqlAlchemyBeatRepository,
    SqlAlchemyBrandRepository,
    SqlAlchemyInfluencerRepository,
    SqlAlchemyRoleRepository,
    SqlAlchemySocialPlatformRepository,
    SqlAlchemyUserRepository,
)


# ============================================================
# Fixtures
# ============================================================


@pytest.fixture
def brands(db) -> SqlAlchemyBrandRepository:
    return SqlAlchemyBrandRepository(db=db)


@pytest.fixture
def influencers(db) -> SqlAlchemyInfluencerRepository:
    return SqlAlchemyInfluencerRepository(db=db)


@pytest.fixture
def beats(db) -> SqlAlchemyBeatRepository:
    return SqlAlchemyBeatRepository(db=db)


@pytest.fixture
def roles(db) -> SqlAlchemyRoleRepository:
    return SqlAlchemyRoleRepository(db=db)


@pytest.fixture
def users(db) -> SqlAlchemyUserRepository:
    return SqlAlchemyUserRepository(db=db)


@pytest.fixture
async def catalog(brands, influencers, beats) -> dict:
    """Deux marques, deux influenceurs, trois beats."""
    acme = await brands.create(Brand(name_en="Acme", name_ar="أكمي"))
    globex = await brands.create(Brand(name_en="Globex 100%", name_ar="جلوبكس"))

    sara = await influencers.create(Influencer(
        username="sara", email="sara@example.com", name_en="Sara", name_ar="سارة",
        social_platforms=[
            SocialPlatform("instagram", "https://instagram.com/sara", 1200),
            SocialPlatform("tiktok", "https://tiktok.com/@sara", 300),
        ],
    ))
    omar = await influencers.create(Influencer(
        username="omar", email="omar@example.com", name_en="Omar", name_ar="عمر",
    ))

    created = []
    for caption, influencer, brand, status in (
        ("Summer launch", sara, acme, "active"),
        ("Winter sale", omar, acme, "inactive"),
        (None, sara, globex, "active"),
    ):
        created.append(await beats.create(Beat(
            media_url="https://cdn.example.com/m.mp4",
            thumbnail_url="https://cdn.example.com/t.jpg",
            status_key=status,
            influencer_id=influencer.id,
            brand_id=brand.id,
            caption=caption,
        )))

    return {"acme": acme, "globex": globex, "sara": sara, "omar": omar, "beats": created}


# ============================================================
# Tests criteres
# ============================================================


class TestCriteria:
    """Traduction des criteres en SQL."""

    async def test_where_equal(self, beats, catalog):
        found = await beats.find_many(
            Specification(Beat).where_equal("status_key", "active")
        )

        assert {b.id for b in found} == {catalog["beats"][0].id, catalog["beats"][2].id}

    async def test_criteria_are_anded(self, beats, catalog):
        found = await beats.find_many(
            Specification(Beat)
            .where_equal("status_key", "active")
            .where_equal("brand_id", catalog["acme"].id)
        )

        assert [b.caption for b in found] == ["Summer launch"]

    async def test_where_in_and_not_in(self, influencers, catalog):
        found = await influencers.find_many(
            Specification(Influencer).where_in("username", ["sara", "nobody"])
        )
        others = await influencers.find_many(
            Specification(Influencer).where_not_in("username", ["sara"])
        )

        assert [i.username for i in found] == ["sara"]
        assert [i.username for i in others] == ["omar"]

    async def test_where_null(self, beats, catalog):
        found = await beats.find_many(Specification(Beat).where_null("caption"))

        assert [b.id for b in found] == [catalog["beats"][2].id]

    async def test_contains_escapes_wildcards(self, brands, catalog):
        literal = await brands.find_many(
            Specification(Brand).where_contains("name_en", "100%")
        )
        wildcard = await brands.find_many(
            Specification(Brand).where_contains("name_en", "%")
        )

        assert [b.name_en for b in literal] == ["Globex 100%"]
        assert [b.name_en for b in wildcard] == ["Globex 100%"]

    async def test_starts_with_ignore_case(self, brands, catalog):
        found = await brands.find_many(
            Specification(Brand).where_starts_with("name_en", "ac", ignore_case=True)
        )

        assert [b.name_en for b in found] == ["Acme"]

    async def test_between(self, beats, catalog):
        ids = [b.id for b in catalog["beats"]]

        found = await beats.find_many(Specification(Beat).where_between("id", ids[0], ids[1]))

        assert len(found) == 2

    async def test_dotted_path_many_to_one(self, beats, catalog):
        found = await beats.find_many(
            Specification(Beat).where_equal("influencer.username", "omar")
        )

        assert [b.caption for b in found] == ["Winter sale"]

    async def test_dotted_path_through_collection(self, influencers, catalog):
        found = await influencers.find_many(
            Specification(Influencer).where_equal("social_platforms.key", "tiktok")
        )

        assert [i.username for i in found] == ["sara"]

    async def test_unknown_value_returns_empty(self, brands, catalog):
        assert await brands.find_many(Specification(Brand).where_equal("name_en", "X")) == []


# ============================================================
# Tests recherche / includes / tri
# ============================================================


class TestSearchIncludesOrdering:
    """Recherche plein texte, relations chargees et tri."""

    async def test_search_is_or_across_relations(self, beats, catalog):
        spec = Specification(Beat).search_in(
            ["caption", "brand.name_en", "influencer.username"], "GLOBEX"
        )

        found = await beats.find_many(spec)

        assert [b.id for b in found] == [catalog["beats"][2].id]

    async def test_search_arabic_names(self, influencers, catalog):
        found = await influencers.find_many(
            Specification(Influencer).search_in(["name_en", "name_ar"], "عمر")
        )

        assert [i.username for i in found] == ["omar"]

    async def test_includes_load_relations(self, beats, catalog):
        beat = await beats.find_by_id(catalog["beats"][0].id, includes=["influencer", "brand"])

        assert beat.influencer.username == "sara"
        assert beat.brand.name_en == "Acme"
        # Les profils de l'influenceur ne sont pas inclus
        assert beat.influencer.social_platforms == []

    async def test_without_includes_relations_are_none(self, beats, catalog):
        beat = await beats.find_by_id(catalog["beats"][0].id)

        assert beat.influencer is None
        assert beat.brand is None
        assert beat.brand_id == catalog["acme"].id

    async def test_nested_include(self, beats, catalog):
        beat = await beats.find_one(
            Specification(Beat)
            .where_equal("id", catalog["beats"][0].id)
            .include("influencer.social_platforms")
        )

        assert {p.key for p in beat.influencer.social_platforms} == {"instagram", "tiktok"}

    async def test_order_by_relation_column(self, beats, catalog):
        found = await beats.find_many(
            Specification(Beat)
            .order_by("brand.name_en", SortDirection.DESC)
            .order_by("id")
        )

        assert [b.brand_id for b in found] == [
            catalog["globex"].id, catalog["acme"].id, catalog["acme"].id,
        ]

    async def test_order_by_collection_rejected(self, influencers, catalog):
        with pytest.raises(ValueError):
            await influencers.find_many(
                Specification(Influencer).order_by("social_platforms.key")
            )


# ============================================================
# Tests pagination
# ============================================================


class TestPagination:
    """Pagination et politique de taille nulle."""

    async def test_page_and_limit(self, beats, catalog):
        spec = Specification(Beat).order_by("id").paginate(page=2, limit=2)

        found = await beats.find_many(spec)

        assert [b.id for b in found] == [catalog["beats"][2].id]

    async def test_skip_take(self, beats, catalog):
        found = await beats.find_many(Specification(Beat).order_by("id").skip_take(1, 1))

        assert [b.id for b in found] == [catalog["beats"][1].id]

    async def test_find_one_honours_offset(self, beats, catalog):
        beat = await beats.find_one(Specification(Beat).order_by("id").skip_take(2, 5))

        assert beat.id == catalog["beats"][2].id

    @pytest.mark.parametrize("page,limit", [(0, 10), (1, -1)])
    async def test_invalid_pagination(self, beats, catalog, page, limit):
        with pytest.raises(InvalidPaginationError):
            await beats.find_many(Specification(Beat).paginate(page, limit))

    async def test_zero_limit_empty_policy(self, beats, catalog):
        assert await beats.find_many(Specification(Beat).paginate(1, 0)) == []

    async def test_zero_limit_unbounded_policy(self, db, catalog):
        repo = SqlAlchemyBeatRepository(db=db, zero_limit=ZeroLimitPolicy.UNBOUNDED)

        assert len(await repo.find_many(Specification(Beat).paginate(1, 0))) == 3

    async def test_find_one_zero_limit_matches_find_many(self, brands, catalog):
        spec = Specification(Brand).paginate(1, 0)

        assert await brands.find_many(spec) == []
        assert await brands.find_one(spec) is None

    async def test_find_one_zero_take_empty_policy(self, beats, catalog):
        assert await beats.find_one(Specification(Beat).skip_take(0, 0)) is None

    async def test_find_one_zero_limit_unbounded_policy(self, db, catalog):
        repo = SqlAlchemyBrandRepository(db=db, zero_limit=ZeroLimitPolicy.UNBOUNDED)

        brand = await repo.find_one(Specification(Brand).order_by("id").paginate(1, 0))

        assert brand.id == catalog["acme"].id

    async def test_list_totals(self, beats, catalog):
        result = await beats.list(
            Specification(Beat).where_equal("status_key", "active").paginate(1, 1)
        )

        assert result.total == 3
        assert result.total_filtered == 2
        assert len(result.items) == 1

    async def test_count_and_exists(self, beats, catalog):
        acme = Specification(Beat).where_equal("brand.name_en", "Acme")

        assert await beats.count() == 3
        assert await beats.count(acme) == 2
        assert await beats.exists(acme)
        assert not await beats.exists(Specification(Beat).where_equal("status_key", "x"))


# ============================================================
# Tests ecriture
# ============================================================


class TestWrites:
    """create / update / delete."""

    async def test_create_assigns_id_and_timestamps(self, brands):
        brand = await brands.create(Brand(name_en="Initech", name_ar="إنيتك"))

        assert brand.id is not None
        assert brand.created_at is not None

    async def test_update(self, brands, catalog):
        acme = catalog["acme"]
        acme.website_url = "https://acme.example.com"

        updated = await brands.update(acme)

        assert updated.website_url == "https://acme.example.com"
        assert (await brands.find_by_id(acme.id)).website_url == "https://acme.example.com"

    async def test_update_missing_raises(self, brands):
        with pytest.raises(RecordNotFoundError):
            await brands.update(Brand(id=999, name_en="x", name_ar="y"))

    async def test_delete_missing_raises(self, brands):
        with pytest.raises(RecordNotFoundError):
            await brands.delete(999)

    async def test_bulk_operations(self, brands):
        created = await brands.create_many([
            Brand(name_en="A", name_ar="أ"),
            Brand(name_en="B", name_ar="ب"),
        ])
        for brand in created:
            brand.logo_url = "https://cdn.example.com/logo.png"

        updated = await brands.update_many(created)
        await brands.delete_many([b.id for b in created])

        assert all(b.logo_url for b in updated)
        assert await brands.count() == 0

    async def test_influencer_platforms_synced_by_key(self, influencers, catalog):
        sara = await influencers.find_by_id(catalog["sara"].id)
        instagram_id = sara.get_social_platform("instagram").id
        sara.get_social_platform("instagram").update_followers(5000)
        sara.remove_social_platform("tiktok")
        sara.add_social_platform(SocialPlatform("youtube", "https://youtube.com/@sara", 10))

        updated = await influencers.update(sara)

        by_key = {p.key: p for p in updated.social_platforms}
        assert set(by_key) == {"instagram", "youtube"}
        assert by_key["instagram"].id == instagram_id
        assert by_key["instagram"].number_of_followers == 5000

    async def test_social_platform_repository(self, db, catalog):
        repo = SqlAlchemySocialPlatformRepository(db=db)

        platform = await repo.find_one(
            Specification(SocialPlatform)
            .where_equal("influencer_id", catalog["sara"].id)
            .where_equal("key", "tiktok")
        )

        assert platform.url == "https://tiktok.com/@sara"

    async def test_user_roles_round_trip(self, users, roles):
        admin = await roles.create(Role(key="Admin", name_en="Admin", name_ar="مشرف"))
        executive = await roles.create(
            Role(key="Executive", name_en="Executive", name_ar="تنفيذي")
        )
        user = await users.create(User.create("Jane", "jane@example.com", roles=[admin]))

        assert user.role_keys == ["Admin"]

        user.assign_roles([executive])
        updated = await users.update(user)

        assert updated.role_keys == ["Executive"]
        found = await users.find_one(
            Specification(User).where_equal("user_roles.role.key", "Executive")
        )
        assert found.id == user.id
