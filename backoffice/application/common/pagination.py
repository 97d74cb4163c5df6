"""
Pagination - Metadonnees des listings pagines.

Regles:
-------
- total_pages = ceil(total_filtered / limit), 0 si limit <= 0
- has_next_page = page < total_pages
- has_previous_page = page > 1
"""

import math
from dataclasses import dataclass, field
from typing import Callable, Generic, Optional, TypeVar

from backoffice.domain.ports.repository import ListResult

T = TypeVar("T")

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 20


@dataclass(frozen=True)
class PaginationMeta:
    page: int
    limit: int
    total: int
    total_filtered: int
    total_pages: int
    has_next_page: bool
    has_previous_page: bool


@dataclass
class PaginatedResult(Generic[T]):
    """Page de resultats + metadonnees."""

    data: list[T] = field(default_factory=list)
    meta: Optional[PaginationMeta] = None


def build_pagination_meta(
    page: int, limit: int, total: int, total_filtered: int
) -> PaginationMeta:
    """
    Calcule les metadonnees de pagination.

    Example:
        >>> meta = build_pagination_meta(page=2, limit=5, total=8, total_filtered=8)
        >>> meta.total_pages, meta.has_next_page, meta.has_previous_page
        (2, False, True)
    """
    total_pages = math.ceil(total_filtered / limit) if limit > 0 else 0
    return PaginationMeta(
        page=page,
        limit=limit,
        total=total,
        total_filtered=total_filtered,
        total_pages=total_pages,
        has_next_page=page < total_pages,
        has_previous_page=page > 1,
    )


def paginate_result(
    listing: ListResult, page: int, limit: int, mapper: Callable
) -> PaginatedResult:
    """Convertit un ListResult en PaginatedResult (items mappes par `mapper`)."""
    return PaginatedResult(
        data=[mapper(item) for item in listing.items],
        meta=build_pagination_meta(
            page=page,
            limit=limit,
            total=listing.total,
            total_filtered=listing.total_filtered,
        ),
    )
