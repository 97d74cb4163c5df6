"""Use Cases des marques."""

from backoffice.application.use_cases.brands.create_brand import (
    CreateBrandRequest,
    CreateBrandUseCase,
)
from backoffice.application.use_cases.brands.delete_brand import DeleteBrandUseCase
from backoffice.application.use_cases.brands.get_brand import GetBrandUseCase
from backoffice.application.use_cases.brands.list_brands import (
    ListBrandsRequest,
    ListBrandsUseCase,
)
from backoffice.application.use_cases.brands.update_brand import (
    UpdateBrandRequest,
    UpdateBrandUseCase,
)

__all__ = [
    "CreateBrandUseCase",
    "CreateBrandRequest",
    "GetBrandUseCase",
    "ListBrandsUseCase",
    "ListBrandsRequest",
    "UpdateBrandUseCase",
    "UpdateBrandRequest",
    "DeleteBrandUseCase",
]
