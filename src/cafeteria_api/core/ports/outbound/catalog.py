from __future__ import annotations

from typing import Protocol, Sequence

from returns.result import Result

from cafeteria_api.core.domain.model.errors import CafeError
from cafeteria_api.core.domain.model.product import Product, ProductId


class ProductCatalog(Protocol):
    """Read-only after construction."""

    def list_all(self) -> Sequence[Product]: ...

    def get(self, product_id: ProductId) -> Result[Product, CafeError]: ...
