"""DTOs de sortie - Beats."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from backoffice.application.dto.brand_dto import BrandSummary
from backoffice.application.dto.influencer_dto import InfluencerSummary
from backoffice.domain.entities import Beat


@dataclass(frozen=True)
class BeatOutput:
    """
    Vue d'un beat.

    Attributes:
        influencer: Resume de l'influenceur (si la relation a ete incluse).
        brand: Resume de la marque (si la relation a ete incluse).
    """

    id: int
    media_url: str
    thumbnail_url: str
    status_key: str
    influencer_id: int
    brand_id: int
    caption: Optional[str] = None
    is_active: bool = False
    influencer: Optional[InfluencerSummary] = None
    brand: Optional[BrandSummary] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, beat: Beat) -> "BeatOutput":
        return cls(
            id=beat.id,
            media_url=beat.media_url,
            thumbnail_url=beat.thumbnail_url,
            status_key=beat.status_key,
            influencer_id=beat.influencer_id,
            brand_id=beat.brand_id,
            caption=beat.caption,
            is_active=beat.is_active,
            influencer=(
                InfluencerSummary.from_entity(beat.influencer) if beat.influencer else None
            ),
            brand=BrandSummary.from_entity(beat.brand) if beat.brand else None,
            created_at=beat.created_at,
            updated_at=beat.updated_at,
        )
