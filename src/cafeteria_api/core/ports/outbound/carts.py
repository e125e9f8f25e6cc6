from __future__ import annotations

from typing import ContextManager, Protocol

from cafeteria_api.core.domain.model.cart import Cart


class CartStore(Protocol):
    """
    Owns the carts, one per session id.

    Callers touch carts only inside ``locked()``. ``get`` hands out the live
    Cart, registering it when the session has none; ``peek`` never registers
    anything and returns a detached empty Cart for unknown sessions.
    """

    def get(self, session_id: str) -> Cart: ...

    def peek(self, session_id: str) -> Cart: ...

    def release(self, session_id: str) -> None:
        """Forget the session's cart if it is empty."""
        ...

    def locked(self) -> ContextManager[None]: ...
