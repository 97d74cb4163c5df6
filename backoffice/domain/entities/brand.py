"""Entite Brand - Marque sponsor des beats."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Brand:
    """
    Marque.

    Les noms anglais et arabe sont chacun uniques, independamment
    l'un de l'autre.

    Attributes:
        name_en: Nom anglais (unique).
        name_ar: Nom arabe (unique).
        logo_url: URL du logo.
        website_url: Site web de la marque.
    """

    name_en: str
    name_ar: str
    logo_url: Optional[str] = None
    website_url: Optional[str] = None
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
