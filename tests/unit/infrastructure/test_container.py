"""
Tests unitaires pour le Container d'injection de dependances.
"""

import pytest

from backoffice.infrastructure.config import Settings, ZeroLimitPolicy
from backoffice.infrastructure.container import Container, get_container, reset_container
from backoffice.infrastructure.persistence import DatabaseManager


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        database_url="sqlite+aiosqlite:///:memory:",
        jwt_secret_key="container-test-secret-of-sufficient-length",
        bcrypt_rounds=4,
        pagination_zero_limit=ZeroLimitPolicy.UNBOUNDED,
    )


class TestContainer:
    """Tests pour Container."""

    def setup_method(self) -> None:
        """Reset le container avant chaque test."""
        reset_container()

    def teardown_method(self) -> None:
        reset_container()

    def test_create_wires_use_cases(self, settings):
        container = Container.create(settings=settings)

        assert container.db.is_sqlite
        assert container.login is not None
        assert container.list_beats is not None
        assert container.social_platforms is not None

    def test_shared_db_manager(self, settings):
        db = DatabaseManager("sqlite+aiosqlite:///:memory:")

        container = Container.create(settings=settings, db=db)

        assert container.db is db
        assert container.unit_of_work._db is db
        assert container.list_users._user_repo._db is db

    def test_zero_limit_policy_propagates(self, settings):
        container = Container.create(settings=settings)

        assert container.list_brands._brand_repo._zero_limit == ZeroLimitPolicy.UNBOUNDED
        assert container.unit_of_work._zero_limit == ZeroLimitPolicy.UNBOUNDED

    def test_services_share_clock(self, settings):
        container = Container.create(settings=settings)

        assert container.token_signer._clock is container.clock
        assert container.login._token_signer is container.token_signer
        assert container.create_user._password_hasher is container.password_hasher

    def test_get_container_singleton(self, settings):
        first = get_container(settings)

        assert get_container() is first

        reset_container()
        assert get_container(settings) is not first
