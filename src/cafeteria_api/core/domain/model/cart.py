from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from cafeteria_api.core.domain.model.product import (
    Money,
    Product,
    ProductId,
    fold_money,
)


@dataclass
class CartLine:
    product_id: ProductId
    quantity: int
    product: Product

    def subtotal(self) -> Money:
        return self.product.price * self.quantity


@dataclass(frozen=True)
class OrderLine:
    product_id: ProductId
    quantity: int
    product: Product

    def subtotal(self) -> Money:
        return self.product.price * self.quantity


@dataclass
class Cart:
    """
    Ordered product lines; at most one line per product id.

    A line only exists while its quantity is positive. Existing lines keep
    their position when merged or updated, new lines go to the end.
    """

    lines: List[CartLine] = field(default_factory=list)

    def find(self, product_id: ProductId) -> CartLine | None:
        for line in self.lines:
            if line.product_id == product_id:
                return line
        return None

    def quantity_of(self, product_id: ProductId) -> int:
        line = self.find(product_id)
        return line.quantity if line is not None else 0

    def add(self, product: Product, quantity: int) -> None:
        line = self.find(product.product_id)
        if line is not None:
            line.quantity += quantity
            return
        self.lines.append(
            CartLine(product_id=product.product_id, quantity=quantity, product=product)
        )

    def set_quantity(self, product_id: ProductId, quantity: int) -> None:
        if quantity <= 0:
            self.remove(product_id)
            return
        line = self.find(product_id)
        if line is not None:
            line.quantity = quantity

    def remove(self, product_id: ProductId) -> None:
        self.lines = [ln for ln in self.lines if ln.product_id != product_id]

    def is_empty(self) -> bool:
        return not self.lines

    def total(self) -> Money:
        return fold_money(ln.subtotal() for ln in self.lines)

    def snapshot(self) -> Tuple[OrderLine, ...]:
        return tuple(
            OrderLine(product_id=ln.product_id, quantity=ln.quantity, product=ln.product)
            for ln in self.lines
        )

    def clear(self) -> None:
        self.lines = []
