from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable


@dataclass(frozen=True)
class ProductId:
    value: int


@dataclass(frozen=True)
class Money:
    """Amount in reais, always held at cent precision."""

    amount: Decimal

    @staticmethod
    def of(amount: Decimal | int | float | str) -> "Money":
        return Money(_cents(Decimal(str(amount))))

    def __add__(self, other: "Money") -> "Money":
        return Money(self.amount + other.amount)

    def __mul__(self, n: int) -> "Money":
        return Money(_cents(self.amount * Decimal(n)))


def _cents(value: Decimal) -> Decimal:
    return value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class Product:
    """Catalog entry. Frozen, so holding a reference is already a snapshot."""

    product_id: ProductId
    name: str
    description: str
    price: Money
    category: str
    image_ref: str
    stock: int


def fold_money(values: Iterable[Money]) -> Money:
    total = Money.of(0)
    for v in values:
        total = total + v
    return total
