"""
Port Repository - Contrat generique de persistance.

Ce port definit le contrat que doivent implementer les adapters
de persistance, pour n'importe quelle entite. Il suit le pattern
Repository de Domain-Driven Design, pilote par Specification.

Responsabilite unique:
----------------------
Charger et persister des entites d'un type donne, les requetes
etant decrites par une Specification.

Toutes les operations sont des coroutines (points de suspension).
Hors UnitOfWork, chaque appel est sa propre transaction; dans un
UnitOfWork, tous les appels partagent la transaction.

Usage:
------
    class GetBrandUseCase:
        def __init__(self, brand_repo: Repository[Brand, int]):
            self._brand_repo = brand_repo

        async def execute(self, brand_id: int) -> Result[BrandOutput]:
            brand = await self._brand_repo.find_by_id(brand_id)
            ...
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Generic, Optional, Sequence, TypeVar

from backoffice.domain.specification import Specification

TEntity = TypeVar("TEntity")
TId = TypeVar("TId")


class RecordNotFoundError(LookupError):
    """Leve par update/delete quand l'identifiant n'existe pas."""

    def __init__(self, entity_name: str, entity_id: Any) -> None:
        super().__init__(f"{entity_name} introuvable: '{entity_id}'")
        self.entity_name = entity_name
        self.entity_id = entity_id


@dataclass
class ListResult(Generic[TEntity]):
    """
    Resultat d'un listing pagine.

    Attributes:
        items: Page courante.
        total: Nombre total d'enregistrements (sans filtre).
        total_filtered: Nombre d'enregistrements satisfaisant les filtres.
    """

    items: list[TEntity] = field(default_factory=list)
    total: int = 0
    total_filtered: int = 0


class Repository(ABC, Generic[TEntity, TId]):
    """
    Interface Repository generique.

    Implementee par SqlAlchemyRepository et ses sous-classes.
    """

    @abstractmethod
    async def find_many(
        self, spec: Optional[Specification[TEntity]] = None
    ) -> list[TEntity]:
        """Entites satisfaisant la specification, tri et pagination appliques."""
        ...

    @abstractmethod
    async def find_one(self, spec: Specification[TEntity]) -> Optional[TEntity]:
        """Premiere entite satisfaisant la specification, ou None."""
        ...

    @abstractmethod
    async def find_by_id(
        self, entity_id: TId, includes: Sequence[str] = ()
    ) -> Optional[TEntity]:
        """Recupere une entite par son ID."""
        ...

    @abstractmethod
    async def count(self, spec: Optional[Specification[TEntity]] = None) -> int:
        """Nombre d'entites satisfaisant les filtres (pagination ignoree)."""
        ...

    @abstractmethod
    async def exists(self, spec: Specification[TEntity]) -> bool:
        """True si au moins une entite satisfait la specification."""
        ...

    @abstractmethod
    async def create(self, entity: TEntity) -> TEntity:
        """Persiste une nouvelle entite et la retourne telle que stockee."""
        ...

    @abstractmethod
    async def update(self, entity: TEntity) -> TEntity:
        """Met a jour une entite existante. Leve RecordNotFoundError sinon."""
        ...

    @abstractmethod
    async def delete(self, entity_id: TId) -> None:
        """Supprime une entite. Leve RecordNotFoundError si absente."""
        ...

    @abstractmethod
    async def create_many(self, entities: Sequence[TEntity]) -> list[TEntity]:
        ...

    @abstractmethod
    async def update_many(self, entities: Sequence[TEntity]) -> list[TEntity]:
        ...

    @abstractmethod
    async def delete_many(self, entity_ids: Sequence[TId]) -> None:
        ...

    @abstractmethod
    async def list(self, spec: Optional[Specification[TEntity]] = None) -> ListResult[TEntity]:
        """Page courante + total + total filtre."""
        ...
