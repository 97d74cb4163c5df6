"""
Exceptions metier du domaine.

Ces exceptions representent des violations des regles metier
et sont independantes de l'infrastructure.

Les use cases ne les levent pas: ils les retournent dans un
Result.fail(...). Chaque exception porte un code stable (pour
identification programmatique) et une categorie (ErrorKind).

Categories:
-----------
- NOT_FOUND: Entite (ou reference) inexistante
- ALREADY_EXISTS: Violation d'unicite
- INVALID_CREDENTIALS: Email ou mot de passe incorrect
- INSUFFICIENT_PERMISSIONS: Role de l'appelant insuffisant
- HAS_DEPENDENTS: Suppression bloquee par des dependants
- ROLE_NOT_FOUND: Cle de role inconnue
- INVALID_VALUE: Valeur mal formee (email, telephone)
"""

from enum import Enum
from typing import Any, Iterable


class ErrorKind(str, Enum):
    """Categories d'erreurs metier."""

    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"
    INVALID_CREDENTIALS = "invalid_credentials"
    INSUFFICIENT_PERMISSIONS = "insufficient_permissions"
    HAS_DEPENDENTS = "has_dependents"
    ROLE_NOT_FOUND = "role_not_found"
    INVALID_VALUE = "invalid_value"


class DomainException(Exception):
    """Exception de base pour toutes les erreurs du domaine."""

    kind: ErrorKind | None = None

    def __init__(self, message: str, code: str | None = None) -> None:
        """
        Initialise une exception du domaine.

        Args:
            message: Message d'erreur descriptif.
            code: Code d'erreur optionnel pour identification programmatique.
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class NotFoundError(DomainException):
    """Base des erreurs 'entite introuvable'."""

    kind = ErrorKind.NOT_FOUND


class AlreadyExistsError(DomainException):
    """Base des violations d'unicite."""

    kind = ErrorKind.ALREADY_EXISTS


class HasDependentsError(DomainException):
    """Base des suppressions bloquees par des dependants."""

    kind = ErrorKind.HAS_DEPENDENTS


class InvalidValueError(DomainException):
    """Base des valeurs mal formees (value objects)."""

    kind = ErrorKind.INVALID_VALUE


# ═══════════════════════════════════════════════════════════════════════════════
# UTILISATEURS / AUTHENTIFICATION
# ═══════════════════════════════════════════════════════════════════════════════

class UserNotFoundError(NotFoundError):
    """Leve quand un utilisateur est introuvable."""

    def __init__(self, identifier: Any = None) -> None:
        message = "Utilisateur introuvable"
        if identifier is not None:
            message = f"Utilisateur introuvable: '{identifier}'"
        super().__init__(message, code="USER_NOT_FOUND")
        self.identifier = identifier


class UserAlreadyExistsError(AlreadyExistsError):
    """Leve quand l'email d'un utilisateur est deja utilise."""

    def __init__(self, email: str) -> None:
        super().__init__(
            f"Un utilisateur existe deja avec l'email '{email}'",
            code="USER_ALREADY_EXISTS"
        )
        self.email = email


class SuperAdminAlreadyExistsError(AlreadyExistsError):
    """Leve quand on tente d'amorcer un second SuperAdmin."""

    def __init__(self) -> None:
        super().__init__(
            "Un SuperAdmin existe deja, l'amorcage est desactive",
            code="SUPER_ADMIN_ALREADY_EXISTS"
        )


class InvalidCredentialsError(DomainException):
    """Leve quand le mot de passe ne correspond pas."""

    kind = ErrorKind.INVALID_CREDENTIALS

    def __init__(self) -> None:
        super().__init__("Identifiants invalides", code="INVALID_CREDENTIALS")


class InsufficientPermissionsError(DomainException):
    """Leve quand l'appelant n'a pas le role requis."""

    kind = ErrorKind.INSUFFICIENT_PERMISSIONS

    def __init__(self, required: str | None = None) -> None:
        message = "Permissions insuffisantes"
        if required:
            message = f"Permissions insuffisantes: role '{required}' requis"
        super().__init__(message, code="INSUFFICIENT_PERMISSIONS")
        self.required = required


class RoleNotFoundError(DomainException):
    """Leve quand une ou plusieurs cles de role sont inconnues."""

    kind = ErrorKind.ROLE_NOT_FOUND

    def __init__(self, keys: Iterable[str]) -> None:
        self.keys = sorted(str(k) for k in keys)
        super().__init__(
            f"Role(s) introuvable(s): {', '.join(self.keys)}",
            code="ROLE_NOT_FOUND"
        )


class InvalidEmailError(InvalidValueError):
    """Leve quand une adresse email est mal formee."""

    def __init__(self, value: Any) -> None:
        super().__init__(
            f"Email invalide: '{value}'. Format attendu: nom@domaine.ext",
            code="INVALID_EMAIL"
        )
        self.invalid_value = value


class InvalidPhoneNumberError(InvalidValueError):
    """Leve quand un numero de telephone est mal forme."""

    def __init__(self, value: Any) -> None:
        super().__init__(
            f"Numero de telephone invalide: '{value}'. "
            "Chiffres, espaces, tirets, parentheses et '+' uniquement, 7 chiffres minimum.",
            code="INVALID_PHONE_NUMBER"
        )
        self.invalid_value = value


class InvalidCountryCodeError(InvalidValueError):
    """Leve quand un indicatif pays est mal forme."""

    def __init__(self, value: Any) -> None:
        super().__init__(
            f"Indicatif pays invalide: '{value}'. Format attendu: +1 a +9999",
            code="INVALID_COUNTRY_CODE"
        )
        self.invalid_value = value


# ═══════════════════════════════════════════════════════════════════════════════
# INFLUENCEURS / PROFILS SOCIAUX
# ═══════════════════════════════════════════════════════════════════════════════

class InfluencerNotFoundError(NotFoundError):
    """Leve quand un influenceur est introuvable."""

    def __init__(self, influencer_id: Any) -> None:
        super().__init__(
            f"Influenceur introuvable: '{influencer_id}'",
            code="INFLUENCER_NOT_FOUND"
        )
        self.influencer_id = influencer_id


class InfluencerUsernameAlreadyExistsError(AlreadyExistsError):
    """Leve quand le username d'influenceur est deja pris."""

    def __init__(self, username: str) -> None:
        super().__init__(
            f"Le username '{username}' est deja utilise",
            code="INFLUENCER_USERNAME_ALREADY_EXISTS"
        )
        self.username = username


class InfluencerEmailAlreadyExistsError(AlreadyExistsError):
    """Leve quand l'email d'influenceur est deja pris."""

    def __init__(self, email: str) -> None:
        super().__init__(
            f"L'email '{email}' est deja utilise par un influenceur",
            code="INFLUENCER_EMAIL_ALREADY_EXISTS"
        )
        self.email = email


class ExistingSocialPlatformForInfluencerError(AlreadyExistsError):
    """Leve quand l'influenceur a deja un profil pour cette plateforme."""

    def __init__(self, key: str) -> None:
        super().__init__(
            f"L'influenceur possede deja un profil '{key}'",
            code="EXISTING_SOCIAL_PLATFORM_FOR_INFLUENCER"
        )
        self.key = key


class SocialPlatformNotFoundError(NotFoundError):
    """Leve quand un profil social est introuvable."""

    def __init__(self, key: str) -> None:
        super().__init__(
            f"Profil social introuvable: '{key}'",
            code="SOCIAL_PLATFORM_NOT_FOUND"
        )
        self.key = key


class InfluencerHasBeatsError(HasDependentsError):
    """Leve quand on supprime un influenceur reference par des beats."""

    def __init__(self, influencer_id: Any, beats_count: int) -> None:
        super().__init__(
            f"Impossible de supprimer l'influenceur '{influencer_id}': "
            f"{beats_count} beat(s) le referencent",
            code="INFLUENCER_HAS_BEATS"
        )
        self.influencer_id = influencer_id
        self.beats_count = beats_count


# ═══════════════════════════════════════════════════════════════════════════════
# MARQUES
# ═══════════════════════════════════════════════════════════════════════════════

class BrandNotFoundError(NotFoundError):
    """Leve quand une marque est introuvable."""

    def __init__(self, brand_id: Any) -> None:
        super().__init__(
            f"Marque introuvable: '{brand_id}'",
            code="BRAND_NOT_FOUND"
        )
        self.brand_id = brand_id


class BrandNameAlreadyExistsError(AlreadyExistsError):
    """Leve quand un nom de marque (en ou ar) est deja pris."""

    def __init__(self, name: str, language: str) -> None:
        super().__init__(
            f"Le nom de marque '{name}' ({language}) est deja utilise",
            code="BRAND_NAME_ALREADY_EXISTS"
        )
        self.name = name
        self.language = language


class BrandHasBeatsError(HasDependentsError):
    """Leve quand on supprime une marque referencee par des beats."""

    def __init__(self, brand_id: Any, beats_count: int) -> None:
        super().__init__(
            f"Impossible de supprimer la marque '{brand_id}': "
            f"{beats_count} beat(s) la referencent",
            code="BRAND_HAS_BEATS"
        )
        self.brand_id = brand_id
        self.beats_count = beats_count


# ═══════════════════════════════════════════════════════════════════════════════
# BEATS
# ═══════════════════════════════════════════════════════════════════════════════

class BeatNotFoundError(NotFoundError):
    """Leve quand un beat est introuvable."""

    def __init__(self, beat_id: Any) -> None:
        super().__init__(
            f"Beat introuvable: '{beat_id}'",
            code="BEAT_NOT_FOUND"
        )
        self.beat_id = beat_id


class BeatInfluencerNotFoundError(NotFoundError):
    """Leve quand l'influenceur reference par un beat n'existe pas."""

    def __init__(self, influencer_id: Any) -> None:
        super().__init__(
            f"Influenceur du beat introuvable: '{influencer_id}'",
            code="BEAT_INFLUENCER_NOT_FOUND"
        )
        self.influencer_id = influencer_id


class BeatBrandNotFoundError(NotFoundError):
    """Leve quand la marque referencee par un beat n'existe pas."""

    def __init__(self, brand_id: Any) -> None:
        super().__init__(
            f"Marque du beat introuvable: '{brand_id}'",
            code="BEAT_BRAND_NOT_FOUND"
        )
        self.brand_id = brand_id
