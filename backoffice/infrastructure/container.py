"""
Container d'injection de dependances.

Ce module fournit un conteneur qui initialise et connecte tous les
composants: base de donnees, repositories, services et use cases.
"""

from dataclasses import dataclass
from typing import Optional

from backoffice.application.use_cases.auth import LoginUseCase, ValidateUserUseCase
from backoffice.application.use_cases.beats import (
    CreateBeatUseCase,
    DeleteBeatUseCase,
    GetBeatUseCase,
    ListBeatsUseCase,
    UpdateBeatUseCase,
)
from backoffice.application.use_cases.brands import (
    CreateBrandUseCase,
    DeleteBrandUseCase,
    GetBrandUseCase,
    ListBrandsUseCase,
    UpdateBrandUseCase,
)
from backoffice.application.use_cases.influencers import (
    CreateInfluencerUseCase,
    DeleteInfluencerUseCase,
    GetInfluencerUseCase,
    ListInfluencersUseCase,
    ManageSocialPlatformUseCase,
    UpdateInfluencerUseCase,
)
from backoffice.application.use_cases.roles import ListRolesUseCase, SeedRolesUseCase
from backoffice.application.use_cases.users import (
    AssignRolesUseCase,
    BootstrapFirstSuperAdminUseCase,
    CreateUserUseCase,
    DeleteUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateUserUseCase,
)
from backoffice.infrastructure.activity import StructlogActivityLogger
from backoffice.infrastructure.clock import SystemClock
from backoffice.infrastructure.config import Settings, get_settings
from backoffice.infrastructure.persistence import (
    DatabaseManager,
    SqlAlchemyBeatRepository,
    SqlAlchemyBrandRepository,
    SqlAlchemyInfluencerRepository,
    SqlAlchemyRoleRepository,
    SqlAlchemyUnitOfWork,
    SqlAlchemyUserRepository,
)
from backoffice.infrastructure.security import BcryptPasswordHasher, JwtTokenSigner


@dataclass
class Container:
    """
    Conteneur d'injection de dependances.

    Example:
        >>> container = Container.create()
        >>> result = await container.create_brand.execute(request)
    """

    settings: Settings
    db: DatabaseManager
    unit_of_work: SqlAlchemyUnitOfWork

    # Services
    clock: SystemClock
    password_hasher: BcryptPasswordHasher
    token_signer: JwtTokenSigner
    activity_logger: StructlogActivityLogger

    # Auth
    login: LoginUseCase
    validate_user: ValidateUserUseCase

    # Roles
    seed_roles: SeedRolesUseCase
    list_roles: ListRolesUseCase

    # Users
    create_user: CreateUserUseCase
    bootstrap_super_admin: BootstrapFirstSuperAdminUseCase
    list_users: ListUsersUseCase
    get_user: GetUserUseCase
    update_user: UpdateUserUseCase
    assign_roles: AssignRolesUseCase
    delete_user: DeleteUserUseCase

    # Influencers
    create_influencer: CreateInfluencerUseCase
    list_influencers: ListInfluencersUseCase
    get_influencer: GetInfluencerUseCase
    update_influencer: UpdateInfluencerUseCase
    delete_influencer: DeleteInfluencerUseCase
    social_platforms: ManageSocialPlatformUseCase

    # Brands
    create_brand: CreateBrandUseCase
    list_brands: ListBrandsUseCase
    get_brand: GetBrandUseCase
    update_brand: UpdateBrandUseCase
    delete_brand: DeleteBrandUseCase

    # Beats
    create_beat: CreateBeatUseCase
    list_beats: ListBeatsUseCase
    get_beat: GetBeatUseCase
    update_beat: UpdateBeatUseCase
    delete_beat: DeleteBeatUseCase

    @classmethod
    def create(
        cls,
        settings: Optional[Settings] = None,
        db: Optional[DatabaseManager] = None,
    ) -> "Container":
        """
        Factory pour creer un conteneur avec toutes les dependances.

        Args:
            settings: Configuration (defaut: get_settings()).
            db: DatabaseManager existant (tests).

        Returns:
            Container configure.
        """
        settings = settings or get_settings()
        db = db or DatabaseManager.from_settings(settings)
        zero_limit = settings.pagination_zero_limit

        # Repositories hors transaction (lectures, suppressions simples)
        users = SqlAlchemyUserRepository(db=db, zero_limit=zero_limit)
        roles = SqlAlchemyRoleRepository(db=db, zero_limit=zero_limit)
        influencers = SqlAlchemyInfluencerRepository(db=db, zero_limit=zero_limit)
        brands = SqlAlchemyBrandRepository(db=db, zero_limit=zero_limit)
        beats = SqlAlchemyBeatRepository(db=db, zero_limit=zero_limit)
        uow = SqlAlchemyUnitOfWork(db, zero_limit=zero_limit)

        # Services
        clock = SystemClock()
        hasher = BcryptPasswordHasher(rounds=settings.bcrypt_rounds)
        signer = JwtTokenSigner(
            secret=settings.jwt_secret_key,
            clock=clock,
            algorithm=settings.jwt_algorithm,
            default_expires_in=settings.jwt_default_expires_in,
        )
        activity = StructlogActivityLogger()

        return cls(
            settings=settings,
            db=db,
            unit_of_work=uow,
            clock=clock,
            password_hasher=hasher,
            token_signer=signer,
            activity_logger=activity,
            login=LoginUseCase(
                users, hasher, signer, clock,
                default_expires_in=settings.jwt_default_expires_in,
            ),
            validate_user=ValidateUserUseCase(users, token_signer=signer),
            seed_roles=SeedRolesUseCase(uow),
            list_roles=ListRolesUseCase(roles),
            create_user=CreateUserUseCase(uow, hasher, activity),
            bootstrap_super_admin=BootstrapFirstSuperAdminUseCase(uow, hasher, activity),
            list_users=ListUsersUseCase(users),
            get_user=GetUserUseCase(users),
            update_user=UpdateUserUseCase(uow, hasher, activity),
            assign_roles=AssignRolesUseCase(uow, activity),
            delete_user=DeleteUserUseCase(users, activity),
            create_influencer=CreateInfluencerUseCase(uow, activity),
            list_influencers=ListInfluencersUseCase(influencers),
            get_influencer=GetInfluencerUseCase(influencers),
            update_influencer=UpdateInfluencerUseCase(uow, activity),
            delete_influencer=DeleteInfluencerUseCase(uow, activity),
            social_platforms=ManageSocialPlatformUseCase(uow, activity),
            create_brand=CreateBrandUseCase(uow, activity),
            list_brands=ListBrandsUseCase(brands),
            get_brand=GetBrandUseCase(brands),
            update_brand=UpdateBrandUseCase(uow, activity),
            delete_brand=DeleteBrandUseCase(uow, activity),
            create_beat=CreateBeatUseCase(uow, activity),
            list_beats=ListBeatsUseCase(beats),
            get_beat=GetBeatUseCase(beats),
            update_beat=UpdateBeatUseCase(uow, activity),
            delete_beat=DeleteBeatUseCase(beats, activity),
        )


# Singleton global
_container: Optional[Container] = None


def get_container(settings: Optional[Settings] = None) -> Container:
    """Recupere ou cree le conteneur global."""
    global _container
    if _container is None:
        _container = Container.create(settings=settings)
    return _container


def reset_container() -> None:
    """Reset le conteneur global (utile pour les tests)."""
    global _container
    _container = None
