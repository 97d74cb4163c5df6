"""
Conversions modele SQLAlchemy <-> entite domaine.

Regles:
-------
- Seules les relations chargees sont lues (jamais de lazy load:
  les relations sont declarees lazy="raise").
- Les enfants possedes (affectations de roles, profils sociaux)
  sont synchronises par cle naturelle (role_id, key): les lignes
  existantes sont reutilisees, les absentes supprimees.
- Les references non possedees (beat -> influenceur/marque) ne
  sont jamais ecrites via la relation, seulement via les *_id.
"""

from typing import Optional

from sqlalchemy import inspect as sa_inspect

from backoffice.domain.entities import (
    Beat,
    Brand,
    Influencer,
    Role,
    SocialPlatform,
    User,
    UserRole,
)
from backoffice.infrastructure.persistence.models import (
    BeatModel,
    BrandModel,
    InfluencerModel,
    RoleModel,
    SocialPlatformModel,
    UserModel,
    UserRoleModel,
)


def is_loaded(model, attribute: str) -> bool:
    """True si l'attribut (relation) est charge sur l'instance."""
    return attribute not in sa_inspect(model).unloaded


# ═══════════════════════════════════════════════════════════════════════════════
# ROLES & USERS
# ═══════════════════════════════════════════════════════════════════════════════

def role_to_entity(model: RoleModel) -> Role:
    return Role(
        id=model.id,
        key=model.key,
        name_en=model.name_en,
        name_ar=model.name_ar,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def role_to_model(role: Role) -> RoleModel:
    return RoleModel(id=role.id, key=role.key, name_en=role.name_en, name_ar=role.name_ar)


def apply_role(role: Role, model: RoleModel) -> None:
    model.key = role.key
    model.name_en = role.name_en
    model.name_ar = role.name_ar


def user_role_to_entity(model: UserRoleModel) -> UserRole:
    role = role_to_entity(model.role) if is_loaded(model, "role") and model.role else None
    return UserRole(id=model.id, user_id=model.user_id, role_id=model.role_id, role=role)


def user_to_entity(model: UserModel) -> User:
    user_roles = []
    if is_loaded(model, "user_roles"):
        user_roles = [user_role_to_entity(ur) for ur in model.user_roles]
    return User(
        id=model.id,
        name=model.name,
        email=model.email,
        password_hash=model.password_hash,
        phone_number=model.phone_number,
        phone_country_code=model.phone_country_code,
        user_roles=user_roles,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def user_to_model(user: User) -> UserModel:
    model = UserModel(id=user.id)
    model.user_roles = []
    apply_user(user, model)
    return model


def apply_user(user: User, model: UserModel) -> None:
    """Copie les champs de l'utilisateur et synchronise ses affectations."""
    model.name = user.name
    model.email = user.email
    model.password_hash = user.password_hash
    model.phone_number = user.phone_number
    model.phone_country_code = user.phone_country_code

    existing = {ur.role_id: ur for ur in model.user_roles}
    wanted = []
    for assignment in user.user_roles:
        if assignment.role_id in existing:
            wanted.append(existing[assignment.role_id])
        else:
            wanted.append(UserRoleModel(role_id=assignment.role_id))
    model.user_roles = wanted


# ═══════════════════════════════════════════════════════════════════════════════
# INFLUENCERS & SOCIAL PLATFORMS
# ═══════════════════════════════════════════════════════════════════════════════

def social_platform_to_entity(model: SocialPlatformModel) -> SocialPlatform:
    return SocialPlatform(
        id=model.id,
        key=model.key,
        url=model.url,
        number_of_followers=model.number_of_followers,
        influencer_id=model.influencer_id,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def social_platform_to_model(platform: SocialPlatform) -> SocialPlatformModel:
    model = SocialPlatformModel(id=platform.id, influencer_id=platform.influencer_id)
    apply_social_platform(platform, model)
    return model


def apply_social_platform(platform: SocialPlatform, model: SocialPlatformModel) -> None:
    model.key = platform.key
    model.url = platform.url
    model.number_of_followers = platform.number_of_followers
    if platform.influencer_id is not None:
        model.influencer_id = platform.influencer_id


def influencer_to_entity(model: InfluencerModel) -> Influencer:
    platforms = []
    if is_loaded(model, "social_platforms"):
        platforms = [social_platform_to_entity(p) for p in model.social_platforms]
    return Influencer(
        id=model.id,
        username=model.username,
        email=model.email,
        name_en=model.name_en,
        name_ar=model.name_ar,
        profile_picture_url=model.profile_picture_url,
        social_platforms=platforms,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def influencer_to_model(influencer: Influencer) -> InfluencerModel:
    model = InfluencerModel(id=influencer.id)
    model.social_platforms = []
    apply_influencer(influencer, model)
    return model


def apply_influencer(influencer: Influencer, model: InfluencerModel) -> None:
    """Copie les champs de l'influenceur et synchronise ses profils (par cle)."""
    model.username = influencer.username
    model.email = influencer.email
    model.name_en = influencer.name_en
    model.name_ar = influencer.name_ar
    model.profile_picture_url = influencer.profile_picture_url

    existing = {p.key: p for p in model.social_platforms}
    wanted = []
    for platform in influencer.social_platforms:
        row = existing.get(platform.key)
        if row is None:
            row = SocialPlatformModel()
        row.key = platform.key
        row.url = platform.url
        row.number_of_followers = platform.number_of_followers
        wanted.append(row)
    model.social_platforms = wanted


# ═══════════════════════════════════════════════════════════════════════════════
# BRANDS & BEATS
# ═══════════════════════════════════════════════════════════════════════════════

def brand_to_entity(model: BrandModel) -> Brand:
    return Brand(
        id=model.id,
        name_en=model.name_en,
        name_ar=model.name_ar,
        logo_url=model.logo_url,
        website_url=model.website_url,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def brand_to_model(brand: Brand) -> BrandModel:
    model = BrandModel(id=brand.id)
    apply_brand(brand, model)
    return model


def apply_brand(brand: Brand, model: BrandModel) -> None:
    model.name_en = brand.name_en
    model.name_ar = brand.name_ar
    model.logo_url = brand.logo_url
    model.website_url = brand.website_url


def beat_to_entity(model: BeatModel) -> Beat:
    influencer: Optional[Influencer] = None
    brand: Optional[Brand] = None
    if is_loaded(model, "influencer") and model.influencer is not None:
        influencer = influencer_to_entity(model.influencer)
    if is_loaded(model, "brand") and model.brand is not None:
        brand = brand_to_entity(model.brand)
    return Beat(
        id=model.id,
        caption=model.caption,
        media_url=model.media_url,
        thumbnail_url=model.thumbnail_url,
        status_key=model.status_key,
        influencer_id=model.influencer_id,
        brand_id=model.brand_id,
        influencer=influencer,
        brand=brand,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def beat_to_model(beat: Beat) -> BeatModel:
    model = BeatModel(id=beat.id)
    apply_beat(beat, model)
    return model


def apply_beat(beat: Beat, model: BeatModel) -> None:
    model.caption = beat.caption
    model.media_url = beat.media_url
    model.thumbnail_url = beat.thumbnail_url
    model.status_key = beat.status_key
    model.influencer_id = beat.influencer_id
    model.brand_id = beat.brand_id
