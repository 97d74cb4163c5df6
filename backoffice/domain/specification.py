"""
Specification - Description declarative d'une requete.

Responsabilite unique:
----------------------
Decrire QUOI charger (filtres, recherche, relations, tri,
pagination) pour un type d'entite, sans rien connaitre du
stockage. La traduction en requete est faite par l'adapter
de persistance.

Semantique:
-----------
- Les predicats (where_*) sont combines par ET.
- La recherche (search_in) est un OU sur plusieurs champs,
  sous-chaine insensible a la casse.
- Les chemins pointes ("brand.name_en", "user_roles.role.key")
  traversent les relations.
- Une specification vide signifie "tout, sans pagination".
- Les noms de champs sont verifies a la construction contre les
  champs de l'entite: une faute de frappe leve UnknownFieldError
  immediatement, jamais au moment de la requete.

Usage:
------
    spec = (
        Specification(Beat)
        .where_equal("status_key", "active")
        .search_in(["caption", "brand.name_en"], "summer")
        .include("brand", "influencer")
        .order_by("created_at", SortDirection.DESC)
        .paginate(page=2, limit=10)
    )
"""

import dataclasses
import typing
from dataclasses import dataclass, field
from enum import Enum
from functools import lru_cache
from typing import Any, Generic, Iterable, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


class UnknownFieldError(ValueError):
    """Leve quand un chemin de champ n'existe pas sur l'entite."""

    def __init__(self, entity_type: type, path: str) -> None:
        super().__init__(
            f"Champ inconnu '{path}' pour l'entite {entity_type.__name__}"
        )
        self.entity_type = entity_type
        self.path = path


class InvalidPaginationError(ValueError):
    """Leve quand les parametres de pagination sont invalides."""


class Operator(str, Enum):
    """Operateurs de comparaison supportes."""

    EQUAL = "eq"
    NOT_EQUAL = "ne"
    LESS_THAN = "lt"
    LESS_OR_EQUAL = "lte"
    GREATER_THAN = "gt"
    GREATER_OR_EQUAL = "gte"
    BETWEEN = "between"
    IN = "in"
    NOT_IN = "not_in"
    CONTAINS = "contains"
    STARTS_WITH = "starts_with"
    ENDS_WITH = "ends_with"
    IS_NULL = "is_null"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class Criterion:
    """Predicat elementaire: champ, operateur, valeur."""

    field: str
    operator: Operator
    value: Any = None
    ignore_case: bool = False


@dataclass(frozen=True)
class OrderBy:
    field: str
    direction: SortDirection = SortDirection.ASC


@dataclass(frozen=True)
class SearchClause:
    """Recherche textuelle: OU sur `fields`, sous-chaine `term`."""

    fields: tuple[str, ...]
    term: str


@dataclass(frozen=True)
class Pagination:
    """
    Pagination, soit par page (1-based) soit par skip/take.

    La specification ne normalise pas les valeurs: leur
    validation est faite par le repository.
    """

    page: Optional[int] = None
    limit: Optional[int] = None
    skip: Optional[int] = None
    take: Optional[int] = None

    @property
    def is_page_based(self) -> bool:
        return self.page is not None

    @property
    def offset(self) -> int:
        if self.is_page_based:
            return (self.page - 1) * (self.limit or 0)
        return self.skip or 0

    @property
    def size(self) -> Optional[int]:
        return self.limit if self.is_page_based else self.take


@dataclass
class Specification(Generic[T]):
    """
    Constructeur fluide de requete pour un type d'entite.

    Chaque methode where_* / include / order_by / paginate modifie
    la specification et la retourne (chainage). Utiliser clone()
    pour deriver une variante sans toucher l'originale.
    """

    entity_type: type
    criteria: list[Criterion] = field(default_factory=list)
    search: Optional[SearchClause] = None
    includes: list[str] = field(default_factory=list)
    ordering: list[OrderBy] = field(default_factory=list)
    pagination: Optional[Pagination] = None

    def __post_init__(self) -> None:
        for path in self._all_paths():
            _check_path(self.entity_type, path)

    # ─── Predicats ──────────────────────────────────────────────────────────

    def where_equal(self, field_name: str, value: Any) -> "Specification[T]":
        return self._add(field_name, Operator.EQUAL, value)

    def where_not_equal(self, field_name: str, value: Any) -> "Specification[T]":
        return self._add(field_name, Operator.NOT_EQUAL, value)

    def where_less_than(self, field_name: str, value: Any) -> "Specification[T]":
        return self._add(field_name, Operator.LESS_THAN, value)

    def where_less_or_equal(self, field_name: str, value: Any) -> "Specification[T]":
        return self._add(field_name, Operator.LESS_OR_EQUAL, value)

    def where_greater_than(self, field_name: str, value: Any) -> "Specification[T]":
        return self._add(field_name, Operator.GREATER_THAN, value)

    def where_greater_or_equal(self, field_name: str, value: Any) -> "Specification[T]":
        return self._add(field_name, Operator.GREATER_OR_EQUAL, value)

    def where_between(self, field_name: str, low: Any, high: Any) -> "Specification[T]":
        """Intervalle inclusif [low, high]."""
        return self._add(field_name, Operator.BETWEEN, (low, high))

    def where_in(self, field_name: str, values: Iterable[Any]) -> "Specification[T]":
        return self._add(field_name, Operator.IN, tuple(values))

    def where_not_in(self, field_name: str, values: Iterable[Any]) -> "Specification[T]":
        return self._add(field_name, Operator.NOT_IN, tuple(values))

    def where_contains(
        self, field_name: str, value: str, ignore_case: bool = False
    ) -> "Specification[T]":
        return self._add(field_name, Operator.CONTAINS, value, ignore_case)

    def where_starts_with(
        self, field_name: str, value: str, ignore_case: bool = False
    ) -> "Specification[T]":
        return self._add(field_name, Operator.STARTS_WITH, value, ignore_case)

    def where_ends_with(
        self, field_name: str, value: str, ignore_case: bool = False
    ) -> "Specification[T]":
        return self._add(field_name, Operator.ENDS_WITH, value, ignore_case)

    def where_null(self, field_name: str, is_null: bool = True) -> "Specification[T]":
        return self._add(field_name, Operator.IS_NULL, is_null)

    # ─── Recherche, relations, tri, pagination ──────────────────────────────

    def search_in(self, fields: Iterable[str], term: Optional[str]) -> "Specification[T]":
        """
        Recherche `term` (sous-chaine, insensible a la casse) dans
        l'un quelconque des champs.

        Un terme vide ou None n'ajoute aucune recherche.
        """
        fields = tuple(fields)
        for path in fields:
            _check_path(self.entity_type, path)
        if term is None or not term.strip():
            return self
        self.search = SearchClause(fields=fields, term=term.strip())
        return self

    def include(self, *paths: str) -> "Specification[T]":
        """Charge les relations (chemins pointes pour l'imbrication)."""
        for path in paths:
            _check_path(self.entity_type, path)
            if path not in self.includes:
                self.includes.append(path)
        return self

    def order_by(
        self, field_name: str, direction: SortDirection | str = SortDirection.ASC
    ) -> "Specification[T]":
        _check_path(self.entity_type, field_name)
        self.ordering.append(OrderBy(field_name, SortDirection(direction)))
        return self

    def paginate(self, page: int, limit: int) -> "Specification[T]":
        """Pagination 1-based (page, limit)."""
        self.pagination = Pagination(page=page, limit=limit)
        return self

    def skip_take(self, skip: int, take: int) -> "Specification[T]":
        self.pagination = Pagination(skip=skip, take=take)
        return self

    # ─── Utilitaires ────────────────────────────────────────────────────────

    @property
    def is_empty(self) -> bool:
        return not (
            self.criteria or self.search or self.includes
            or self.ordering or self.pagination
        )

    def clone(self) -> "Specification[T]":
        """Copie independante (les listes ne sont pas partagees)."""
        return Specification(
            entity_type=self.entity_type,
            criteria=list(self.criteria),
            search=self.search,
            includes=list(self.includes),
            ordering=list(self.ordering),
            pagination=self.pagination,
        )

    def for_entity(self, entity_type: type) -> "Specification[U]":
        """
        Re-parametre explicitement la specification pour un autre
        type d'entite. Tous les chemins sont re-verifies.
        """
        return Specification(
            entity_type=entity_type,
            criteria=list(self.criteria),
            search=self.search,
            includes=list(self.includes),
            ordering=list(self.ordering),
            pagination=self.pagination,
        )

    def without_pagination(self) -> "Specification[T]":
        """Copie sans pagination ni tri (pour les comptages)."""
        spec = self.clone()
        spec.pagination = None
        spec.ordering = []
        return spec

    def to_dict(self) -> dict:
        """Vue serialisable (logs, debug)."""
        return {
            "entity": self.entity_type.__name__,
            "criteria": [
                {
                    "field": c.field,
                    "operator": c.operator.value,
                    "value": list(c.value) if isinstance(c.value, tuple) else c.value,
                    "ignore_case": c.ignore_case,
                }
                for c in self.criteria
            ],
            "search": (
                {"fields": list(self.search.fields), "term": self.search.term}
                if self.search else None
            ),
            "includes": list(self.includes),
            "order_by": [
                {"field": o.field, "direction": o.direction.value}
                for o in self.ordering
            ],
            "pagination": (
                dataclasses.asdict(self.pagination) if self.pagination else None
            ),
        }

    def _add(
        self,
        field_name: str,
        operator: Operator,
        value: Any,
        ignore_case: bool = False,
    ) -> "Specification[T]":
        _check_path(self.entity_type, field_name)
        self.criteria.append(Criterion(field_name, operator, value, ignore_case))
        return self

    def _all_paths(self) -> list[str]:
        paths = [c.field for c in self.criteria]
        paths += list(self.includes)
        paths += [o.field for o in self.ordering]
        if self.search:
            paths += list(self.search.fields)
        return paths


# ═══════════════════════════════════════════════════════════════════════════════
# VERIFICATION DES CHEMINS
# ═══════════════════════════════════════════════════════════════════════════════

def _check_path(entity_type: type, path: str) -> None:
    """
    Verifie qu'un chemin (eventuellement pointe) existe.

    Chaque segment est verifie tant que le type courant est une
    dataclass; au-dela (valeurs scalaires) la verification s'arrete.
    """
    current: Optional[type] = entity_type
    for segment in path.split("."):
        if current is None or not dataclasses.is_dataclass(current):
            return
        types = _field_types(current)
        if segment not in types:
            raise UnknownFieldError(entity_type, path)
        current = _related_type(types[segment])


@lru_cache(maxsize=None)
def _field_types(entity_type: type) -> dict[str, Any]:
    hints = typing.get_type_hints(entity_type)
    return {f.name: hints.get(f.name) for f in dataclasses.fields(entity_type)}


def _related_type(annotation: Any) -> Optional[type]:
    """Extrait la dataclass d'une annotation (X, Optional[X], list[X])."""
    if dataclasses.is_dataclass(annotation):
        return annotation
    for arg in typing.get_args(annotation):
        related = _related_type(arg)
        if related is not None:
            return related
    return None
