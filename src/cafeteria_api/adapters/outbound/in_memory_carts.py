from __future__ import annotations

import threading
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Dict, Iterator

from cafeteria_api.core.domain.model.cart import Cart
from cafeteria_api.core.ports.inbound.cart import DEFAULT_CART_SESSION
from cafeteria_api.core.ports.outbound.carts import CartStore


@dataclass
class InMemoryCartStore(CartStore):
    _carts: Dict[str, Cart] = field(default_factory=dict)
    _lock: threading.Lock = field(default_factory=threading.Lock)

    def get(self, session_id: str) -> Cart:
        cart = self._carts.get(session_id)
        if cart is None:
            cart = Cart()
            self._carts[session_id] = cart
        return cart

    def peek(self, session_id: str) -> Cart:
        cart = self._carts.get(session_id)
        return cart if cart is not None else Cart()

    def release(self, session_id: str) -> None:
        if session_id == DEFAULT_CART_SESSION:
            return
        cart = self._carts.get(session_id)
        if cart is not None and cart.is_empty():
            del self._carts[session_id]

    def session_count(self) -> int:
        return len(self._carts)

    @contextmanager
    def locked(self) -> Iterator[None]:
        # single lock shared by every session
        with self._lock:
            yield
