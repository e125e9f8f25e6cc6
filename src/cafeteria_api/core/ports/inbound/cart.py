from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Sequence

from returns.result import Result

from cafeteria_api.core.domain.model.errors import CafeError
from cafeteria_api.core.domain.model.product import Money, Product, ProductId

DEFAULT_CART_SESSION = "default"


@dataclass(frozen=True)
class AddItemCommand:
    product_id: int
    quantity: int = 1
    session_id: str = DEFAULT_CART_SESSION


@dataclass(frozen=True)
class UpdateQuantityCommand:
    product_id: int
    quantity: int
    session_id: str = DEFAULT_CART_SESSION


@dataclass(frozen=True)
class RemoveItemCommand:
    product_id: int
    session_id: str = DEFAULT_CART_SESSION


@dataclass(frozen=True)
class CartLineView:
    product_id: ProductId
    quantity: int
    product: Product
    subtotal: Money


@dataclass(frozen=True)
class CartView:
    lines: Sequence[CartLineView]
    total: Money


class CartUseCase(Protocol):
    def add_item(self, command: AddItemCommand) -> Result[CartView, CafeError]: ...

    def list_items(
        self, session_id: str = DEFAULT_CART_SESSION
    ) -> Result[CartView, CafeError]: ...

    def update_quantity(
        self, command: UpdateQuantityCommand
    ) -> Result[CartView, CafeError]: ...

    def remove_item(self, command: RemoveItemCommand) -> Result[CartView, CafeError]: ...
