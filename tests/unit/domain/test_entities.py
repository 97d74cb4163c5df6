"""
Tests unitaires pour les Entities du domaine.
"""

import pytest

from backoffice.domain.entities import (
    Beat,
    Influencer,
    InvalidFollowersCountError,
    Role,
    SocialPlatform,
    User,
)
from backoffice.domain.exceptions import (
    InvalidCountryCodeError,
    InvalidEmailError,
    InvalidPhoneNumberError,
)
from backoffice.domain.value_objects import RoleKey, normalize_email


class TestUser:
    """Tests pour l'entite User."""

    def test_create_normalizes_email_and_name(self, admin_role):
        user = User.create(
            name="  Jane Doe ",
            email="  Jane@Example.COM ",
            password_hash="hashed:x",
            roles=[admin_role],
        )

        assert user.name == "Jane Doe"
        assert user.email == "jane@example.com"
        assert user.role_keys == ["Admin"]
        assert len(user.id) == 36

    def test_create_generates_distinct_ids(self):
        first = User.create(name="A", email="a@example.com")
        second = User.create(name="B", email="b@example.com")

        assert first.id != second.id

    def test_assign_roles_replaces_and_deduplicates(self, admin_role, executive_role):
        user = User.create(name="Jane", email="jane@example.com", roles=[admin_role])

        user.assign_roles([executive_role, executive_role])

        assert user.role_keys == ["Executive"]
        assert user.user_roles[0].role_id == executive_role.id
        assert user.user_roles[0].user_id == user.id

    def test_is_super_admin(self, super_admin_role, admin_role):
        user = User.create(name="Root", email="root@example.com", roles=[super_admin_role])
        other = User.create(name="Ops", email="ops@example.com", roles=[admin_role])

        assert user.is_super_admin
        assert user.has_role(RoleKey.SUPER_ADMIN)
        assert not other.is_super_admin

    def test_update_profile_ignores_none(self, sample_user):
        sample_user.update_profile(
            name=None, email=" NEW@Example.com", phone_number="(050) 555-1234"
        )

        assert sample_user.name == "Jane Doe"
        assert sample_user.email == "new@example.com"
        assert sample_user.phone_number == "(050) 555-1234"

    def test_create_with_phone(self):
        user = User.create(
            name="Jane", email="jane@example.com",
            phone_number="50 123 4567", phone_country_code="+971",
        )

        assert user.phone_number == "50 123 4567"
        assert user.phone_country_code == "+971"

    @pytest.mark.parametrize("email", ["jane", "jane@example", "ja ne@example.com", ""])
    def test_create_rejects_invalid_email(self, email):
        with pytest.raises(InvalidEmailError):
            User.create(name="Jane", email=email)

    def test_create_rejects_invalid_phone(self):
        with pytest.raises(InvalidPhoneNumberError):
            User.create(name="Jane", email="jane@example.com", phone_number="555")

    def test_create_rejects_invalid_country_code(self):
        with pytest.raises(InvalidCountryCodeError):
            User.create(
                name="Jane", email="jane@example.com",
                phone_number="5551234567", phone_country_code="33",
            )

    def test_update_profile_invalid_value_leaves_user_unchanged(self, sample_user):
        with pytest.raises(InvalidEmailError):
            sample_user.update_profile(name="Other", email="not-an-email")

        assert sample_user.name == "Jane Doe"
        assert sample_user.email == "jane@example.com"

    def test_update_profile_rejects_invalid_phone(self, sample_user):
        with pytest.raises(InvalidPhoneNumberError):
            sample_user.update_profile(phone_number="call me")

        assert sample_user.phone_number is None

    def test_normalize_email(self):
        assert normalize_email(" A@B.Com ") == "a@b.com"


class TestRole:
    """Tests pour l'entite Role."""

    def test_from_definition(self):
        from backoffice.domain.value_objects import BUILT_IN_ROLES

        role = Role.from_definition(BUILT_IN_ROLES[0])

        assert role.key == "SuperAdmin"
        assert role.name_en == "Super Admin"
        assert role.id is None


class TestSocialPlatform:
    """Tests pour l'entite SocialPlatform."""

    def test_negative_followers_rejected(self):
        with pytest.raises(InvalidFollowersCountError) as exc_info:
            SocialPlatform(key="tiktok", url="https://tiktok.com/@s", number_of_followers=-1)

        assert exc_info.value.invalid_value == -1
        assert exc_info.value.code == "INVALID_FOLLOWERS_COUNT"

    def test_update_followers(self):
        platform = SocialPlatform(key="tiktok", url="https://tiktok.com/@s")

        platform.update_followers(42)

        assert platform.number_of_followers == 42

    def test_update_followers_negative(self):
        platform = SocialPlatform(key="tiktok", url="https://tiktok.com/@s", number_of_followers=5)

        with pytest.raises(InvalidFollowersCountError):
            platform.update_followers(-5)
        assert platform.number_of_followers == 5


class TestInfluencer:
    """Tests pour l'entite Influencer."""

    def test_add_social_platform_sets_owner(self, sample_influencer):
        sample_influencer.add_social_platform(
            SocialPlatform(key="tiktok", url="https://tiktok.com/@sara", number_of_followers=300)
        )

        tiktok = sample_influencer.get_social_platform("tiktok")
        assert tiktok.influencer_id == sample_influencer.id
        assert sample_influencer.total_followers == 1500

    def test_add_same_key_replaces_and_keeps_id(self, sample_influencer):
        sample_influencer.add_social_platform(
            SocialPlatform(key="instagram", url="https://instagram.com/sara2", number_of_followers=5)
        )

        assert len(sample_influencer.social_platforms) == 1
        instagram = sample_influencer.get_social_platform("instagram")
        assert instagram.id == 100
        assert instagram.url == "https://instagram.com/sara2"

    def test_remove_social_platform(self, sample_influencer):
        assert sample_influencer.remove_social_platform("instagram") is True
        assert sample_influencer.remove_social_platform("instagram") is False
        assert sample_influencer.total_followers == 0

    def test_total_followers_empty(self):
        influencer = Influencer(username="x", email="x@ex.com", name_en="X", name_ar="س")
        assert influencer.total_followers == 0


class TestBeat:
    """Tests pour l'entite Beat."""

    def test_is_active(self, sample_beat):
        assert sample_beat.is_active

    def test_inactive_status(self):
        beat = Beat(
            media_url="m", thumbnail_url="t", status_key="inactive",
            influencer_id=1, brand_id=2,
        )
        assert not beat.is_active
        assert beat.influencer is None
