from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CafeError(Exception):
    message: str

    def __str__(self) -> str:  # pragma: no cover
        return self.message


@dataclass(frozen=True)
class ValidationError(CafeError):
    pass


@dataclass(frozen=True)
class NotFound(CafeError):
    pass


@dataclass(frozen=True)
class ProductNotFound(NotFound):
    product_id: int

    def __str__(self) -> str:  # pragma: no cover
        return f"product_not_found: {self.product_id} ({self.message})"


@dataclass(frozen=True)
class CartLineNotFound(NotFound):
    product_id: int

    def __str__(self) -> str:  # pragma: no cover
        return f"cart_line_not_found: {self.product_id} ({self.message})"


@dataclass(frozen=True)
class InsufficientStock(CafeError):
    product_id: int
    requested: int
    available: int

    def __str__(self) -> str:  # pragma: no cover
        return (
            f"insufficient_stock: product={self.product_id} "
            f"requested={self.requested} available={self.available} ({self.message})"
        )


@dataclass(frozen=True)
class EmptyCart(CafeError):
    pass


@dataclass(frozen=True)
class PublishError(CafeError):
    pass
