"""DTOs de sortie - Influenceurs et profils sociaux."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from backoffice.domain.entities import Influencer, SocialPlatform


@dataclass(frozen=True)
class SocialPlatformOutput:
    id: Optional[int]
    key: str
    url: str
    number_of_followers: int
    influencer_id: Optional[int] = None

    @classmethod
    def from_entity(cls, platform: SocialPlatform) -> "SocialPlatformOutput":
        return cls(
            id=platform.id,
            key=platform.key,
            url=platform.url,
            number_of_followers=platform.number_of_followers,
            influencer_id=platform.influencer_id,
        )


@dataclass(frozen=True)
class InfluencerOutput:
    id: int
    username: str
    email: str
    name_en: str
    name_ar: str
    profile_picture_url: Optional[str] = None
    social_platforms: list[SocialPlatformOutput] = field(default_factory=list)
    total_followers: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, influencer: Influencer) -> "InfluencerOutput":
        return cls(
            id=influencer.id,
            username=influencer.username,
            email=influencer.email,
            name_en=influencer.name_en,
            name_ar=influencer.name_ar,
            profile_picture_url=influencer.profile_picture_url,
            social_platforms=[
                SocialPlatformOutput.from_entity(p) for p in influencer.social_platforms
            ],
            total_followers=influencer.total_followers,
            created_at=influencer.created_at,
            updated_at=influencer.updated_at,
        )


@dataclass(frozen=True)
class InfluencerSummary:
    """Vue reduite, embarquee dans BeatOutput."""

    id: int
    username: str
    name_en: str
    name_ar: str
    profile_picture_url: Optional[str] = None

    @classmethod
    def from_entity(cls, influencer: Influencer) -> "InfluencerSummary":
        return cls(
            id=influencer.id,
            username=influencer.username,
            name_en=influencer.name_en,
            name_ar=influencer.name_ar,
            profile_picture_url=influencer.profile_picture_url,
        )
