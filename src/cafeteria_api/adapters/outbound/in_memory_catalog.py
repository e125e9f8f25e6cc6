from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Sequence, Tuple

from returns.result import Failure, Result, Success

from cafeteria_api.core.domain.model.errors import CafeError, ProductNotFound
from cafeteria_api.core.domain.model.product import Product, ProductId
from cafeteria_api.core.ports.outbound.catalog import ProductCatalog


@dataclass(frozen=True)
class InMemoryProductCatalog(ProductCatalog):
    _products: Tuple[Product, ...]
    _by_id: Dict[int, Product] = field(default_factory=dict)

    @staticmethod
    def of(products: Iterable[Product]) -> "InMemoryProductCatalog":
        items = tuple(products)
        by_id: Dict[int, Product] = {}
        for p in items:
            if p.product_id.value in by_id:
                raise ValueError(f"duplicate product id: {p.product_id.value}")
            by_id[p.product_id.value] = p
        return InMemoryProductCatalog(_products=items, _by_id=by_id)

    def list_all(self) -> Sequence[Product]:
        return self._products

    def get(self, product_id: ProductId) -> Result[Product, CafeError]:
        product = self._by_id.get(product_id.value)
        if product is None:
            return Failure(
                ProductNotFound(
                    message="Produto não encontrado", product_id=product_id.value
                )
            )
        return Success(product)
