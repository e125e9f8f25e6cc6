from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from returns.result import Result, Success

from cafeteria_api.core.domain.model.errors import CafeError
from cafeteria_api.core.domain.model.product import Product, ProductId
from cafeteria_api.core.ports.inbound.catalog import (
    ALL_CATEGORIES,
    CatalogUseCase,
    GetProductQuery,
    ListProductsQuery,
)
from cafeteria_api.core.ports.outbound.catalog import ProductCatalog


@dataclass(frozen=True)
class CatalogDeps:
    catalog: ProductCatalog


@dataclass(frozen=True)
class CatalogService(CatalogUseCase):
    deps: CatalogDeps

    def list_products(
        self, query: ListProductsQuery
    ) -> Result[Sequence[Product], CafeError]:
        products = self.deps.catalog.list_all()
        if not query.category or query.category == ALL_CATEGORIES:
            return Success(tuple(products))
        # exact, case-sensitive match
        return Success(tuple(p for p in products if p.category == query.category))

    def get_product(self, query: GetProductQuery) -> Result[Product, CafeError]:
        return self.deps.catalog.get(ProductId(query.product_id))

    def list_categories(self) -> Result[Sequence[str], CafeError]:
        # dict keeps first-occurrence order
        seen = dict.fromkeys(p.category for p in self.deps.catalog.list_all())
        return Success(tuple(seen))
