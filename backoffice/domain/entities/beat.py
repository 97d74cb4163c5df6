"""
Entite Beat - Element de contenu promotionnel.

Un beat reference un influenceur et une marque (references non
possedantes): ni l'un ni l'autre ne peut etre supprime tant que
des beats les referencent.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from backoffice.domain.entities.brand import Brand
from backoffice.domain.entities.influencer import Influencer

ACTIVE_STATUS = "active"


@dataclass
class Beat:
    """
    Beat publie par un influenceur pour une marque.

    Attributes:
        media_url: URL du media.
        thumbnail_url: URL de la miniature.
        status_key: Statut (active, inactive, ...).
        influencer_id: ID de l'influenceur.
        brand_id: ID de la marque.
        caption: Legende optionnelle.
        influencer: Influenceur charge (si inclus).
        brand: Marque chargee (si incluse).
    """

    media_url: str
    thumbnail_url: str
    status_key: str
    influencer_id: int
    brand_id: int
    caption: Optional[str] = None
    id: Optional[int] = None
    influencer: Optional[Influencer] = None
    brand: Optional[Brand] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def is_active(self) -> bool:
        return self.status_key == ACTIVE_STATUS
