from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from returns.result import Result

from cafeteria_api.core.domain.model.errors import CafeError
from cafeteria_api.core.domain.model.order import OrderId
from cafeteria_api.core.domain.model.product import Money


@dataclass(frozen=True)
class OrderPlaced:
    order_id: OrderId
    total: Money
    line_count: int


class EventPublisher(Protocol):
    def publish(self, event: OrderPlaced) -> Result[None, CafeError]: ...
