from __future__ import annotations

from dataclasses import dataclass

from returns.result import Failure, Result, Success

from cafeteria_api.core.domain.model.cart import Cart
from cafeteria_api.core.domain.model.errors import (
    CafeError,
    CartLineNotFound,
    InsufficientStock,
    ValidationError,
)
from cafeteria_api.core.domain.model.product import Product, ProductId
from cafeteria_api.core.ports.inbound.cart import (
    DEFAULT_CART_SESSION,
    AddItemCommand,
    CartLineView,
    CartUseCase,
    CartView,
    RemoveItemCommand,
    UpdateQuantityCommand,
)
from cafeteria_api.core.ports.outbound.carts import CartStore
from cafeteria_api.core.ports.outbound.catalog import ProductCatalog


@dataclass(frozen=True)
class CartDeps:
    catalog: ProductCatalog
    carts: CartStore


@dataclass(frozen=True)
class CartService(CartUseCase):
    deps: CartDeps

    def add_item(self, command: AddItemCommand) -> Result[CartView, CafeError]:
        if command.quantity <= 0:
            return Failure(ValidationError("quantidade deve ser maior que zero"))

        product_id = ProductId(command.product_id)
        session_id = command.session_id
        with self.deps.carts.locked():
            in_cart = self.deps.carts.peek(session_id).quantity_of(product_id)
            return (
                self.deps.catalog.get(product_id)
                .bind(lambda p: _check_stock(p, in_cart + command.quantity))
                .map(
                    lambda p: _add(self.deps.carts.get(session_id), p, command.quantity)
                )
            )

    def list_items(
        self, session_id: str = DEFAULT_CART_SESSION
    ) -> Result[CartView, CafeError]:
        with self.deps.carts.locked():
            return Success(to_cart_view(self.deps.carts.peek(session_id)))

    def update_quantity(
        self, command: UpdateQuantityCommand
    ) -> Result[CartView, CafeError]:
        product_id = ProductId(command.product_id)
        with self.deps.carts.locked():
            cart = self.deps.carts.peek(command.session_id)
            if cart.find(product_id) is None:
                return Failure(
                    CartLineNotFound(
                        message="Item não encontrado no carrinho",
                        product_id=command.product_id,
                    )
                )
            # replaces the quantity; <= 0 drops the line. stock is not re-checked.
            cart.set_quantity(product_id, command.quantity)
            self.deps.carts.release(command.session_id)
            return Success(to_cart_view(cart))

    def remove_item(self, command: RemoveItemCommand) -> Result[CartView, CafeError]:
        with self.deps.carts.locked():
            cart = self.deps.carts.peek(command.session_id)
            cart.remove(ProductId(command.product_id))
            self.deps.carts.release(command.session_id)
            return Success(to_cart_view(cart))


def _check_stock(product: Product, wanted: int) -> Result[Product, CafeError]:
    if product.stock < wanted:
        return Failure(
            InsufficientStock(
                message="Estoque insuficiente",
                product_id=product.product_id.value,
                requested=wanted,
                available=product.stock,
            )
        )
    return Success(product)


def _add(cart: Cart, product: Product, quantity: int) -> CartView:
    cart.add(product, quantity)
    return to_cart_view(cart)


def to_cart_view(cart: Cart) -> CartView:
    lines = tuple(
        CartLineView(
            product_id=ln.product_id,
            quantity=ln.quantity,
            product=ln.product,
            subtotal=ln.subtotal(),
        )
        for ln in cart.lines
    )
    return CartView(lines=lines, total=cart.total())
