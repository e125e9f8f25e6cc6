from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Sequence

from returns.result import Result

from cafeteria_api.core.domain.model.errors import CafeError
from cafeteria_api.core.domain.model.product import Product

ALL_CATEGORIES = "all"


@dataclass(frozen=True)
class ListProductsQuery:
    category: str | None = None  # None or "all" -> whole catalog


@dataclass(frozen=True)
class GetProductQuery:
    product_id: int


class CatalogUseCase(Protocol):
    def list_products(
        self, query: ListProductsQuery
    ) -> Result[Sequence[Product], CafeError]: ...

    def get_product(self, query: GetProductQuery) -> Result[Product, CafeError]: ...

    def list_categories(self) -> Result[Sequence[str], CafeError]: ...
