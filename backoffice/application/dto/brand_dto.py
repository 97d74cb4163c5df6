"""DTOs de sortie - Marques."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from backoffice.domain.entities import Brand


@dataclass(frozen=True)
class BrandOutput:
    id: int
    name_en: str
    name_ar: str
    logo_url: Optional[str] = None
    website_url: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, brand: Brand) -> "BrandOutput":
        return cls(
            id=brand.id,
            name_en=brand.name_en,
            name_ar=brand.name_ar,
            logo_url=brand.logo_url,
            website_url=brand.website_url,
            created_at=brand.created_at,
            updated_at=brand.updated_at,
        )


@dataclass(frozen=True)
class BrandSummary:
    id: int
    name_en: str
    name_ar: str
    logo_url: Optional[str] = None

    @classmethod
    def from_entity(cls, brand: Brand) -> "BrandSummary":
        return cls(
            id=brand.id,
            name_en=brand.name_en,
            name_ar=brand.name_ar,
            logo_url=brand.logo_url,
        )
