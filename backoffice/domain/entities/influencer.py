"""
Entite Influencer - Influenceur et ses profils sociaux.

Un influenceur possede ses profils sociaux (SocialPlatform):
ils sont supprimes avec lui. Un influenceur a au plus un
profil par plateforme (cle).
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from backoffice.domain.exceptions import DomainException


class InvalidFollowersCountError(DomainException):
    """Leve quand le nombre d'abonnes est negatif."""

    def __init__(self, value: int) -> None:
        super().__init__(
            f"Nombre d'abonnes invalide: {value}. "
            "Le nombre d'abonnes ne peut pas etre negatif.",
            code="INVALID_FOLLOWERS_COUNT"
        )
        self.invalid_value = value


@dataclass
class SocialPlatform:
    """
    Profil d'un influenceur sur une plateforme sociale.

    Attributes:
        key: Cle de la plateforme (instagram, tiktok, ...).
        url: URL du profil.
        number_of_followers: Nombre d'abonnes (>= 0).
        influencer_id: ID de l'influenceur proprietaire.
    """

    key: str
    url: str
    number_of_followers: int = 0
    influencer_id: Optional[int] = None
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        if self.number_of_followers < 0:
            raise InvalidFollowersCountError(self.number_of_followers)

    def update_followers(self, count: int) -> None:
        if count < 0:
            raise InvalidFollowersCountError(count)
        self.number_of_followers = count


@dataclass
class Influencer:
    """
    Influenceur.

    Example:
        >>> influencer = Influencer(username="sara", email="sara@ex.com",
        ...                         name_en="Sara", name_ar="سارة")
        >>> influencer.add_social_platform(
        ...     SocialPlatform("instagram", "https://instagram.com/sara", 1200))
        >>> influencer.total_followers
        1200
    """

    username: str
    email: str
    name_en: str
    name_ar: str
    profile_picture_url: Optional[str] = None
    id: Optional[int] = None
    social_platforms: list[SocialPlatform] = field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def get_social_platform(self, key: str) -> Optional[SocialPlatform]:
        """Retourne le profil pour la plateforme, ou None."""
        for platform in self.social_platforms:
            if platform.key == key:
                return platform
        return None

    def add_social_platform(self, platform: SocialPlatform) -> None:
        """
        Ajoute un profil, en remplacant celui de meme cle s'il existe.

        Args:
            platform: Profil a ajouter.
        """
        platform.influencer_id = self.id
        existing = self.get_social_platform(platform.key)
        if existing is not None:
            platform.id = existing.id
            index = self.social_platforms.index(existing)
            self.social_platforms[index] = platform
        else:
            self.social_platforms.append(platform)

    def remove_social_platform(self, key: str) -> bool:
        """Retire le profil de cle `key`. Retourne False s'il n'existait pas."""
        existing = self.get_social_platform(key)
        if existing is None:
            return False
        self.social_platforms.remove(existing)
        return True

    @property
    def total_followers(self) -> int:
        """Somme des abonnes sur toutes les plateformes."""
        return sum(p.number_of_followers for p in self.social_platforms)
