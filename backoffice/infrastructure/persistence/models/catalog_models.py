"""
Modeles SQLAlchemy du catalogue: influenceurs, profils sociaux,
marques et beats.

Tables:
-------
- influencers: username et email uniques
- social_platforms: (influencer_id, key) unique, supprimes avec l'influenceur
- brands: name_en et name_ar uniques (independamment)
- beats: references influenceur et marque (ON DELETE RESTRICT)
"""
from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship

from backoffice.infrastructure.persistence.models.base import Base, utcnow


class InfluencerModel(Base):
    """Table influencers - Influenceurs."""
    __tablename__ = "influencers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(100), unique=True, nullable=False, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    name_en = Column(String(255), nullable=False)
    name_ar = Column(String(255), nullable=False)
    profile_picture_url = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False
    )

    social_platforms = relationship(
        "SocialPlatformModel",
        back_populates="influencer",
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="raise",
    )


class SocialPlatformModel(Base):
    """
    Table social_platforms - Profils sociaux des influenceurs.

    Colonnes:
        key: Plateforme (instagram, tiktok, ...)
        url: URL du profil
        number_of_followers: Abonnes (>= 0)
        influencer_id: Influenceur proprietaire
    """
    __tablename__ = "social_platforms"

    id = Column(Integer, primary_key=True, autoincrement=True)
    key = Column(String(50), nullable=False)
    url = Column(Text, nullable=False)
    number_of_followers = Column(Integer, nullable=False, default=0)
    influencer_id = Column(
        Integer, ForeignKey("influencers.id", ondelete="CASCADE"), nullable=False
    )
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False
    )

    influencer = relationship(
        "InfluencerModel", back_populates="social_platforms", lazy="raise"
    )

    __table_args__ = (
        UniqueConstraint("influencer_id", "key", name="uq_social_platforms_influencer_key"),
        CheckConstraint("number_of_followers >= 0", name="ck_social_platforms_followers"),
    )


class BrandModel(Base):
    """Table brands - Marques."""
    __tablename__ = "brands"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name_en = Column(String(255), unique=True, nullable=False)
    name_ar = Column(String(255), unique=True, nullable=False)
    logo_url = Column(Text, nullable=True)
    website_url = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False
    )


class BeatModel(Base):
    """
    Table beats - Contenus promotionnels.

    Les references influenceur et marque ne sont pas possedees:
    leur suppression est refusee tant qu'un beat les reference.
    """
    __tablename__ = "beats"

    id = Column(Integer, primary_key=True, autoincrement=True)
    caption = Column(Text, nullable=True)
    media_url = Column(Text, nullable=False)
    thumbnail_url = Column(Text, nullable=False)
    status_key = Column(String(30), nullable=False, default="active")
    influencer_id = Column(
        Integer, ForeignKey("influencers.id", ondelete="RESTRICT"), nullable=False
    )
    brand_id = Column(
        Integer, ForeignKey("brands.id", ondelete="RESTRICT"), nullable=False
    )
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False
    )

    influencer = relationship("InfluencerModel", lazy="raise")
    brand = relationship("BrandModel", lazy="raise")

    __table_args__ = (
        Index("idx_beats_influencer", "influencer_id"),
        Index("idx_beats_brand", "brand_id"),
        Index("idx_beats_status", "status_key"),
        Index("idx_beats_created", "created_at"),
    )
