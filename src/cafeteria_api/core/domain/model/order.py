from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Tuple

from cafeteria_api.core.domain.model.cart import OrderLine
from cafeteria_api.core.domain.model.product import Money, fold_money


class OrderStatus(str, Enum):
    PROCESSING = "processando"


@dataclass(frozen=True)
class OrderId:
    value: int  # epoch milliseconds

    @staticmethod
    def from_datetime(at: datetime) -> "OrderId":
        return OrderId(int(at.timestamp() * 1000))


@dataclass
class OrderIdSequence:
    """Timestamp-derived order ids, bumped by 1ms when two orders share a tick."""

    _last: int = 0

    def next(self, at: datetime) -> OrderId:
        candidate = OrderId.from_datetime(at).value
        if candidate <= self._last:
            candidate = self._last + 1
        self._last = candidate
        return OrderId(candidate)


@dataclass(frozen=True)
class Order:
    order_id: OrderId
    created_at: datetime
    lines: Tuple[OrderLine, ...]
    customer_info: Any = field(default_factory=dict)
    status: OrderStatus = OrderStatus.PROCESSING

    def total(self) -> Money:
        return fold_money(ln.subtotal() for ln in self.lines)


def now_utc() -> datetime:
    return datetime.now(timezone.utc)
