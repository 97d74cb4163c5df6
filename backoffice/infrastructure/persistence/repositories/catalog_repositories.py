"""
Repositories SQLAlchemy du catalogue.

- Influenceurs: charges avec leurs profils sociaux (agregat)
- Profils sociaux: accessibles directement (ajout/maj/retrait unitaire)
- Marques, Beats: relations chargees a la demande (include)
"""

from backoffice.domain.entities import Beat, Brand, Influencer, SocialPlatform
from backoffice.infrastructure.persistence import mappers
from backoffice.infrastructure.persistence.models import (
    BeatModel,
    BrandModel,
    InfluencerModel,
    SocialPlatformModel,
)
from backoffice.infrastructure.persistence.repositories.base_repository import (
    SqlAlchemyRepository,
)


class SqlAlchemyInfluencerRepository(
    SqlAlchemyRepository[Influencer, int, InfluencerModel]
):
    model = InfluencerModel
    entity_type = Influencer
    entity_name = "Influencer"
    default_includes = ("social_platforms",)

    def _to_entity(self, model: InfluencerModel) -> Influencer:
        return mappers.influencer_to_entity(model)

    def _to_model(self, entity: Influencer) -> InfluencerModel:
        return mappers.influencer_to_model(entity)

    def _apply(self, entity: Influencer, model: InfluencerModel) -> None:
        mappers.apply_influencer(entity, model)


class SqlAlchemySocialPlatformRepository(
    SqlAlchemyRepository[SocialPlatform, int, SocialPlatformModel]
):
    model = SocialPlatformModel
    entity_type = SocialPlatform
    entity_name = "SocialPlatform"

    def _to_entity(self, model: SocialPlatformModel) -> SocialPlatform:
        return mappers.social_platform_to_entity(model)

    def _to_model(self, entity: SocialPlatform) -> SocialPlatformModel:
        return mappers.social_platform_to_model(entity)

    def _apply(self, entity: SocialPlatform, model: SocialPlatformModel) -> None:
        mappers.apply_social_platform(entity, model)


class SqlAlchemyBrandRepository(SqlAlchemyRepository[Brand, int, BrandModel]):
    model = BrandModel
    entity_type = Brand
    entity_name = "Brand"

    def _to_entity(self, model: BrandModel) -> Brand:
        return mappers.brand_to_entity(model)

    def _to_model(self, entity: Brand) -> BrandModel:
        return mappers.brand_to_model(entity)

    def _apply(self, entity: Brand, model: BrandModel) -> None:
        mappers.apply_brand(entity, model)


class SqlAlchemyBeatRepository(SqlAlchemyRepository[Beat, int, BeatModel]):
    model = BeatModel
    entity_type = Beat
    entity_name = "Beat"

    def _to_entity(self, model: BeatModel) -> Beat:
        return mappers.beat_to_entity(model)

    def _to_model(self, entity: Beat) -> BeatModel:
        return mappers.beat_to_model(entity)

    def _apply(self, entity: Beat, model: BeatModel) -> None:
        mappers.apply_beat(entity, model)
