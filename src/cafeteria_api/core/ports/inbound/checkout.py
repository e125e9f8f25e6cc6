from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol

from returns.result import Result

from cafeteria_api.core.domain.model.errors import CafeError
from cafeteria_api.core.domain.model.order import Order
from cafeteria_api.core.ports.inbound.cart import DEFAULT_CART_SESSION


@dataclass(frozen=True)
class CheckoutCommand:
    customer_info: Any = None  # opaque, passed through to the order
    session_id: str = DEFAULT_CART_SESSION


class CheckoutUseCase(Protocol):
    def checkout(self, command: CheckoutCommand) -> Result[Order, CafeError]: ...
