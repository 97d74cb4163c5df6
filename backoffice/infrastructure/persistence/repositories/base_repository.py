"""
SqlAlchemyRepository - Adapter SQLAlchemy generique pilote par Specification.

Implemente le port Repository pour n'importe quel couple
(entite domaine, modele SQLAlchemy). Les sous-classes declarent
le modele, le type d'entite et les fonctions de conversion.

Traduction d'une Specification:
-------------------------------
- criteria: AND de predicats sur colonnes
- chemins pointes ("brand.name_en"): EXISTS correle via
  relationship.has() / relationship.any()
- search: OR de ILIKE '%terme%' (echappement des jokers)
- includes: chaines de selectinload
- ordering: ORDER BY (jointure externe pour les relations scalaires)
- pagination: OFFSET / LIMIT, valeurs invalides refusees

Sessions:
---------
- Hors UnitOfWork (db): chaque appel ouvre sa propre transaction
- Dans un UnitOfWork (session): flush uniquement, le commit
  appartient au UnitOfWork
"""

from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Callable, Generic, Optional, Sequence, TypeVar

from sqlalchemy import and_, func, literal, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import RelationshipProperty, selectinload
from sqlalchemy.sql import Select
from sqlalchemy.sql.elements import ColumnElement

from backoffice.domain.ports.repository import ListResult, RecordNotFoundError, Repository
from backoffice.domain.specification import (
    Criterion,
    InvalidPaginationError,
    Operator,
    Pagination,
    SortDirection,
    Specification,
)
from backoffice.infrastructure.config import ZeroLimitPolicy
from backoffice.infrastructure.logging import get_logger
from backoffice.infrastructure.persistence.database import DatabaseManager

logger = get_logger(__name__)

TEntity = TypeVar("TEntity")
TId = TypeVar("TId")
TModel = TypeVar("TModel")


class SqlAlchemyRepository(Repository[TEntity, TId], ABC, Generic[TEntity, TId, TModel]):
    """
    Repository SQLAlchemy generique (abstrait).

    Attributes (a definir par les sous-classes):
        model: Classe du modele SQLAlchemy.
        entity_type: Classe de l'entite domaine.
        entity_name: Nom utilise dans les erreurs.
        default_includes: Relations toujours chargees (agregat complet).
    """

    model: type
    entity_type: type
    entity_name: str = "Entity"
    default_includes: tuple[str, ...] = ()

    def __init__(
        self,
        db: Optional[DatabaseManager] = None,
        session: Optional[AsyncSession] = None,
        zero_limit: ZeroLimitPolicy = ZeroLimitPolicy.EMPTY,
    ):
        """
        Initialise le repository.

        Args:
            db: DatabaseManager (une transaction par appel).
            session: Session d'un UnitOfWork (transaction partagee).
            zero_limit: Interpretation d'une taille de page nulle.
        """
        if db is None and session is None:
            raise ValueError("Un DatabaseManager ou une session est requis")
        self._db = db
        self._session = session
        self._zero_limit = ZeroLimitPolicy(zero_limit)

    # ─── Conversions (sous-classes) ─────────────────────────────────────────

    @abstractmethod
    def _to_entity(self, model: TModel) -> TEntity:
        """Convertit un modele charge en entite."""
        ...

    @abstractmethod
    def _to_model(self, entity: TEntity) -> TModel:
        """Construit un nouveau modele depuis une entite."""
        ...

    @abstractmethod
    def _apply(self, entity: TEntity, model: TModel) -> None:
        """Reporte l'etat de l'entite sur un modele existant."""
        ...

    def _entity_id(self, entity: TEntity) -> TId:
        return entity.id

    # ─── Lecture ────────────────────────────────────────────────────────────

    async def find_many(
        self, spec: Optional[Specification[TEntity]] = None
    ) -> list[TEntity]:
        async with self._session_scope() as session:
            return await self._find_many(session, spec)

    async def find_one(self, spec: Specification[TEntity]) -> Optional[TEntity]:
        async with self._session_scope() as session:
            stmt = self._select(spec, paginate=False)
            pagination = spec.pagination if spec else None
            if pagination is not None:
                self._check_pagination(pagination)
                if self._is_empty_page(pagination):
                    return None
                stmt = stmt.offset(pagination.offset)
            result = await session.execute(stmt.limit(1))
            model = result.scalars().first()
            return self._to_entity(model) if model is not None else None

    async def find_by_id(
        self, entity_id: TId, includes: Sequence[str] = ()
    ) -> Optional[TEntity]:
        spec = Specification(self.entity_type).where_equal("id", entity_id)
        spec.include(*includes)
        return await self.find_one(spec)

    async def count(self, spec: Optional[Specification[TEntity]] = None) -> int:
        async with self._session_scope() as session:
            return await self._count(session, spec)

    async def exists(self, spec: Specification[TEntity]) -> bool:
        async with self._session_scope() as session:
            stmt = select(literal(1)).select_from(self.model)
            conditions = self._conditions(spec)
            if conditions:
                stmt = stmt.where(and_(*conditions))
            result = await session.execute(stmt.limit(1))
            return result.first() is not None

    # ─── Ecriture ───────────────────────────────────────────────────────────

    async def create(self, entity: TEntity) -> TEntity:
        async with self._session_scope() as session:
            model = self._to_model(entity)
            session.add(model)
            await session.flush()
            logger.debug("record_created", entity=self.entity_name, id=model.id)
            return await self._reload(session, model.id)

    async def update(self, entity: TEntity) -> TEntity:
        entity_id = self._entity_id(entity)
        async with self._session_scope() as session:
            model = await self._load_model(session, entity_id)
            if model is None:
                raise RecordNotFoundError(self.entity_name, entity_id)
            self._apply(entity, model)
            await session.flush()
            logger.debug("record_updated", entity=self.entity_name, id=entity_id)
            return await self._reload(session, entity_id)

    async def delete(self, entity_id: TId) -> None:
        async with self._session_scope() as session:
            model = await self._load_model(session, entity_id)
            if model is None:
                raise RecordNotFoundError(self.entity_name, entity_id)
            await session.delete(model)
            await session.flush()
            logger.debug("record_deleted", entity=self.entity_name, id=entity_id)

    async def create_many(self, entities: Sequence[TEntity]) -> list[TEntity]:
        return [await self.create(entity) for entity in entities]

    async def update_many(self, entities: Sequence[TEntity]) -> list[TEntity]:
        return [await self.update(entity) for entity in entities]

    async def delete_many(self, entity_ids: Sequence[TId]) -> None:
        for entity_id in entity_ids:
            await self.delete(entity_id)

    # ─── Internes ───────────────────────────────────────────────────────────

    @asynccontextmanager
    async def _session_scope(self) -> AsyncIterator[AsyncSession]:
        if self._session is not None:
            yield self._session
        else:
            async with self._db.get_session() as session:
                yield session

    async def _find_many(
        self, session: AsyncSession, spec: Optional[Specification[TEntity]]
    ) -> list[TEntity]:
        pagination = spec.pagination if spec else None
        if pagination is not None:
            self._check_pagination(pagination)
            if self._is_empty_page(pagination):
                return []
        result = await session.execute(self._select(spec))
        return [self._to_entity(model) for model in result.scalars().all()]

    async def _count(
        self, session: AsyncSession, spec: Optional[Specification[TEntity]]
    ) -> int:
        stmt = select(func.count()).select_from(self.model)
        conditions = self._conditions(spec)
        if conditions:
            stmt = stmt.where(and_(*conditions))
        result = await session.execute(stmt)
        return int(result.scalar_one())

    async def _load_model(self, session: AsyncSession, entity_id: TId) -> Optional[TModel]:
        stmt = (
            select(self.model)
            .where(self.model.id == entity_id)
            .options(*[self._loader(path) for path in self.default_includes])
            .execution_options(populate_existing=True)
        )
        result = await session.execute(stmt)
        return result.scalars().first()

    async def _reload(self, session: AsyncSession, entity_id: TId) -> TEntity:
        model = await self._load_model(session, entity_id)
        return self._to_entity(model)

    def _select(self, spec: Optional[Specification[TEntity]], paginate: bool = True) -> Select:
        stmt = select(self.model)

        conditions = self._conditions(spec)
        if conditions:
            stmt = stmt.where(and_(*conditions))

        includes = list(self.default_includes)
        if spec is not None:
            includes += [path for path in spec.includes if path not in includes]
        if includes:
            stmt = stmt.options(*[self._loader(path) for path in includes])

        if spec is not None and spec.ordering:
            stmt = self._apply_ordering(stmt, spec)

        if paginate and spec is not None and spec.pagination is not None:
            stmt = self._apply_pagination(stmt, spec.pagination)

        return stmt.execution_options(populate_existing=True)

    def _conditions(self, spec: Optional[Specification[TEntity]]) -> list[ColumnElement]:
        if spec is None:
            return []
        conditions = [
            self._path_clause(self.model, criterion.field.split("."), _operator_clause(criterion))
            for criterion in spec.criteria
        ]
        if spec.search is not None:
            term = spec.search.term
            conditions.append(or_(*[
                self._path_clause(
                    self.model,
                    path.split("."),
                    lambda column: column.icontains(term, autoescape=True),
                )
                for path in spec.search.fields
            ]))
        return conditions

    def _path_clause(
        self,
        model: type,
        parts: list[str],
        build: Callable[[Any], ColumnElement],
    ) -> ColumnElement:
        """Construit le predicat, en traversant les relations si besoin."""
        attribute = getattr(model, parts[0])
        if len(parts) == 1:
            return build(attribute)
        relation = _relationship(attribute, parts[0])
        inner = self._path_clause(relation.mapper.class_, parts[1:], build)
        return attribute.any(inner) if relation.uselist else attribute.has(inner)

    def _loader(self, path: str):
        option = None
        model = self.model
        for part in path.split("."):
            attribute = getattr(model, part)
            relation = _relationship(attribute, part)
            option = selectinload(attribute) if option is None else option.selectinload(attribute)
            model = relation.mapper.class_
        return option

    def _apply_ordering(self, stmt: Select, spec: Specification[TEntity]) -> Select:
        joined: dict[str, type] = {}
        for order in spec.ordering:
            parts = order.field.split(".")
            model = self.model
            prefix = ""
            for part in parts[:-1]:
                prefix = f"{prefix}.{part}" if prefix else part
                attribute = getattr(model, part)
                relation = _relationship(attribute, part)
                if relation.uselist:
                    raise ValueError(
                        f"Tri impossible sur la collection '{order.field}'"
                    )
                if prefix not in joined:
                    stmt = stmt.outerjoin(attribute)
                    joined[prefix] = relation.mapper.class_
                model = joined[prefix]
            column = getattr(model, parts[-1])
            stmt = stmt.order_by(
                column.desc() if order.direction == SortDirection.DESC else column.asc()
            )
        return stmt

    def _check_pagination(self, pagination: Pagination) -> None:
        if pagination.is_page_based:
            if pagination.page < 1:
                raise InvalidPaginationError(f"page doit etre >= 1 (recu {pagination.page})")
            if pagination.limit is None or pagination.limit < 0:
                raise InvalidPaginationError(f"limit doit etre >= 0 (recu {pagination.limit})")
        else:
            if pagination.skip is None or pagination.skip < 0:
                raise InvalidPaginationError(f"skip doit etre >= 0 (recu {pagination.skip})")
            if pagination.take is None or pagination.take < 0:
                raise InvalidPaginationError(f"take doit etre >= 0 (recu {pagination.take})")

    def _is_empty_page(self, pagination: Pagination) -> bool:
        """Taille nulle sous la politique EMPTY: aucune ligne."""
        return pagination.size == 0 and self._zero_limit == ZeroLimitPolicy.EMPTY

    def _apply_pagination(self, stmt: Select, pagination: Pagination) -> Select:
        self._check_pagination(pagination)
        if pagination.offset:
            stmt = stmt.offset(pagination.offset)
        if pagination.size == 0:
            if self._zero_limit == ZeroLimitPolicy.UNBOUNDED:
                return stmt
        return stmt.limit(pagination.size)

    # list() est defini en dernier: il masque le builtin dans le corps de classe.
    async def list(
        self, spec: Optional[Specification[TEntity]] = None
    ) -> ListResult[TEntity]:
        async with self._session_scope() as session:
            total = await self._count(session, None)
            total_filtered = await self._count(session, spec)
            items = await self._find_many(session, spec)
            return ListResult(items=items, total=total, total_filtered=total_filtered)


def _relationship(attribute: Any, name: str) -> RelationshipProperty:
    relation = getattr(attribute, "property", None)
    if not isinstance(relation, RelationshipProperty):
        raise ValueError(f"'{name}' n'est pas une relation")
    return relation


def _operator_clause(criterion: Criterion) -> Callable[[Any], ColumnElement]:
    """Retourne une fonction colonne -> predicat pour le critere."""
    operator = criterion.operator
    value = criterion.value
    ignore_case = criterion.ignore_case

    def build(column: Any) -> ColumnElement:
        if operator == Operator.EQUAL:
            return column.is_(None) if value is None else column == value
        if operator == Operator.NOT_EQUAL:
            return column.is_not(None) if value is None else column != value
        if operator == Operator.LESS_THAN:
            return column < value
        if operator == Operator.LESS_OR_EQUAL:
            return column <= value
        if operator == Operator.GREATER_THAN:
            return column > value
        if operator == Operator.GREATER_OR_EQUAL:
            return column >= value
        if operator == Operator.BETWEEN:
            low, high = value
            return column.between(low, high)
        if operator == Operator.IN:
            return column.in_(list(value))
        if operator == Operator.NOT_IN:
            return column.not_in(list(value))
        if operator == Operator.CONTAINS:
            if ignore_case:
                return column.icontains(value, autoescape=True)
            return column.contains(value, autoescape=True)
        if operator == Operator.STARTS_WITH:
            if ignore_case:
                return column.istartswith(value, autoescape=True)
            return column.startswith(value, autoescape=True)
        if operator == Operator.ENDS_WITH:
            if ignore_case:
                return column.iendswith(value, autoescape=True)
            return column.endswith(value, autoescape=True)
        if operator == Operator.IS_NULL:
            return column.is_(None) if value else column.is_not(None)
        raise ValueError(f"Operateur non supporte: {operator}")

    return build
