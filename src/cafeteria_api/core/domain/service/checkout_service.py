from __future__ import annotations

from dataclasses import dataclass, field

from returns.result import Failure, Result

from cafeteria_api.core.domain.model.cart import Cart
from cafeteria_api.core.domain.model.errors import CafeError, EmptyCart
from cafeteria_api.core.domain.model.order import Order, OrderIdSequence, now_utc
from cafeteria_api.core.ports.inbound.checkout import CheckoutCommand, CheckoutUseCase
from cafeteria_api.core.ports.outbound.carts import CartStore
from cafeteria_api.core.ports.outbound.events import EventPublisher, OrderPlaced


@dataclass(frozen=True)
class CheckoutDeps:
    carts: CartStore
    events: EventPublisher
    order_ids: OrderIdSequence = field(default_factory=OrderIdSequence)


@dataclass(frozen=True)
class CheckoutService(CheckoutUseCase):
    deps: CheckoutDeps

    def checkout(self, command: CheckoutCommand) -> Result[Order, CafeError]:
        with self.deps.carts.locked():
            cart = self.deps.carts.peek(command.session_id)
            if cart.is_empty():
                return Failure(EmptyCart("Carrinho vazio"))

            created_at = now_utc()
            order = Order(
                order_id=self.deps.order_ids.next(created_at),
                created_at=created_at,
                lines=cart.snapshot(),
                customer_info=command.customer_info or {},
            )
            event = OrderPlaced(
                order_id=order.order_id,
                total=order.total(),
                line_count=len(order.lines),
            )
            # the cart is only drained once the event went out
            return self.deps.events.publish(event).map(
                lambda _: self._drain(command.session_id, cart, order)
            )

    def _drain(self, session_id: str, cart: Cart, order: Order) -> Order:
        cart.clear()
        self.deps.carts.release(session_id)
        return order
