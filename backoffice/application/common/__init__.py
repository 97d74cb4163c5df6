"""Elements communs aux use cases."""

from backoffice.application.common.pagination import (
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    PaginatedResult,
    PaginationMeta,
    build_pagination_meta,
    paginate_result,
)
from backoffice.application.common.result import Result

__all__ = [
    "Result",
    "PaginatedResult",
    "PaginationMeta",
    "build_pagination_meta",
    "paginate_result",
    "DEFAULT_PAGE",
    "DEFAULT_LIMIT",
]
