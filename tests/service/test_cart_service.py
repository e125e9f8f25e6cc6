"""Cart use cases over the seeded catalog."""

from concurrent.futures import ThreadPoolExecutor
from decimal import Decimal

import pytest
from returns.result import Failure, Success

from cafeteria_api.bootstrap import UseCases
from cafeteria_api.core.domain.model.errors import (
    CartLineNotFound,
    InsufficientStock,
    ProductNotFound,
    ValidationError,
)
from cafeteria_api.core.ports.inbound.cart import (
    AddItemCommand,
    RemoveItemCommand,
    UpdateQuantityCommand,
)

ESFIHAS = 4  # price 8.50, stock 25


def _lines(usecases: UseCases, session: str = "default") -> list[tuple[int, int]]:
    view = usecases.cart.list_items(session).unwrap()
    return [(ln.product_id.value, ln.quantity) for ln in view.lines]


class TestAddItem:

    def test_adds_line_with_subtotal(self, usecases):
        view = usecases.cart.add_item(AddItemCommand(ESFIHAS, 3)).unwrap()
        assert len(view.lines) == 1
        assert view.lines[0].quantity == 3
        assert view.lines[0].subtotal.amount == Decimal("25.50")

    def test_default_quantity_is_one(self, usecases):
        usecases.cart.add_item(AddItemCommand(ESFIHAS))
        assert _lines(usecases) == [(ESFIHAS, 1)]

    def test_repeated_add_merges(self, usecases):
        usecases.cart.add_item(AddItemCommand(ESFIHAS, 2))
        usecases.cart.add_item(AddItemCommand(ESFIHAS, 2))
        assert _lines(usecases) == [(ESFIHAS, 4)]

    def test_unknown_product_leaves_cart_unchanged(self, usecases):
        usecases.cart.add_item(AddItemCommand(1, 1))
        result = usecases.cart.add_item(AddItemCommand(999, 1))
        assert isinstance(result, Failure)
        assert isinstance(result.failure(), ProductNotFound)
        assert _lines(usecases) == [(1, 1)]

    def test_over_stock_leaves_cart_unchanged(self, usecases):
        result = usecases.cart.add_item(AddItemCommand(ESFIHAS, 999))
        assert isinstance(result.failure(), InsufficientStock)
        assert _lines(usecases) == []

    def test_stock_is_checked_against_cumulative_quantity(self, usecases):
        usecases.cart.add_item(AddItemCommand(ESFIHAS, 20))
        result = usecases.cart.add_item(AddItemCommand(ESFIHAS, 6))
        err = result.failure()
        assert isinstance(err, InsufficientStock)
        assert err.requested == 26
        assert err.available == 25
        assert _lines(usecases) == [(ESFIHAS, 20)]

    def test_exact_stock_is_allowed(self, usecases):
        result = usecases.cart.add_item(AddItemCommand(ESFIHAS, 25))
        assert isinstance(result, Success)

    @pytest.mark.parametrize("qty", [0, -2])
    def test_non_positive_quantity_is_rejected(self, usecases, qty):
        result = usecases.cart.add_item(AddItemCommand(ESFIHAS, qty))
        assert isinstance(result.failure(), ValidationError)


class TestListItems:

    def test_total_sums_subtotals(self, usecases):
        usecases.cart.add_item(AddItemCommand(ESFIHAS, 3))
        usecases.cart.add_item(AddItemCommand(1, 2))
        view = usecases.cart.list_items().unwrap()
        assert view.total.amount == Decimal("61.50")

    def test_empty_cart(self, usecases):
        view = usecases.cart.list_items().unwrap()
        assert view.lines == ()
        assert view.total.amount == Decimal("0.00")


class TestUpdateQuantity:

    def test_replaces_quantity(self, usecases):
        usecases.cart.add_item(AddItemCommand(ESFIHAS, 3))
        usecases.cart.update_quantity(UpdateQuantityCommand(ESFIHAS, 1))
        assert _lines(usecases) == [(ESFIHAS, 1)]

    def test_does_not_recheck_stock(self, usecases):
        usecases.cart.add_item(AddItemCommand(ESFIHAS, 3))
        result = usecases.cart.update_quantity(UpdateQuantityCommand(ESFIHAS, 100))
        assert isinstance(result, Success)
        assert _lines(usecases) == [(ESFIHAS, 100)]

    @pytest.mark.parametrize("qty", [0, -1])
    def test_non_positive_removes_line(self, usecases, qty):
        usecases.cart.add_item(AddItemCommand(ESFIHAS, 3))
        usecases.cart.add_item(AddItemCommand(1, 1))
        usecases.cart.update_quantity(UpdateQuantityCommand(ESFIHAS, qty))
        assert _lines(usecases) == [(1, 1)]

    def test_missing_line_is_not_found(self, usecases):
        result = usecases.cart.update_quantity(UpdateQuantityCommand(ESFIHAS, 2))
        assert isinstance(result.failure(), CartLineNotFound)


class TestRemoveItem:

    def test_removes_line(self, usecases):
        usecases.cart.add_item(AddItemCommand(ESFIHAS, 3))
        usecases.cart.remove_item(RemoveItemCommand(ESFIHAS))
        assert _lines(usecases) == []

    def test_absent_line_is_a_no_op(self, usecases):
        usecases.cart.add_item(AddItemCommand(1, 2))
        result = usecases.cart.remove_item(RemoveItemCommand(ESFIHAS))
        assert isinstance(result, Success)
        assert _lines(usecases) == [(1, 2)]


class TestSessions:

    def test_sessions_have_separate_carts(self, usecases):
        usecases.cart.add_item(AddItemCommand(ESFIHAS, 1, session_id="a"))
        usecases.cart.add_item(AddItemCommand(1, 2, session_id="b"))
        assert _lines(usecases, "a") == [(ESFIHAS, 1)]
        assert _lines(usecases, "b") == [(1, 2)]
        assert _lines(usecases) == []

    def test_reading_unknown_sessions_registers_nothing(self, usecases):
        for i in range(50):
            assert usecases.cart.list_items(f"visitor-{i}").unwrap().lines == ()
        assert usecases.cart.deps.carts.session_count() == 0

    def test_failed_add_registers_nothing(self, usecases):
        usecases.cart.add_item(AddItemCommand(999, 1, session_id="a"))
        usecases.cart.add_item(AddItemCommand(ESFIHAS, 999, session_id="b"))
        assert usecases.cart.deps.carts.session_count() == 0

    def test_emptied_session_is_forgotten(self, usecases):
        store = usecases.cart.deps.carts
        usecases.cart.add_item(AddItemCommand(ESFIHAS, 1, session_id="a"))
        usecases.cart.add_item(AddItemCommand(1, 1, session_id="b"))
        assert store.session_count() == 2

        usecases.cart.remove_item(RemoveItemCommand(ESFIHAS, session_id="a"))
        usecases.cart.update_quantity(UpdateQuantityCommand(1, 0, session_id="b"))
        assert store.session_count() == 0

    def test_default_session_is_kept_when_emptied(self, usecases):
        store = usecases.cart.deps.carts
        usecases.cart.add_item(AddItemCommand(ESFIHAS, 1))
        usecases.cart.remove_item(RemoveItemCommand(ESFIHAS))
        assert store.session_count() == 1
        assert _lines(usecases) == []


class TestConcurrentMutations:

    def test_parallel_adds_land_in_one_line(self, usecases):
        calls = 25  # equals the stock of ESFIHAS
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(
                pool.map(
                    lambda _: usecases.cart.add_item(AddItemCommand(ESFIHAS, 1)),
                    range(calls),
                )
            )
        assert all(isinstance(r, Success) for r in results)
        assert _lines(usecases) == [(ESFIHAS, calls)]

    def test_parallel_adds_never_exceed_stock(self, usecases):
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(
                pool.map(
                    lambda _: usecases.cart.add_item(AddItemCommand(ESFIHAS, 1)),
                    range(40),
                )
            )
        accepted = [r for r in results if isinstance(r, Success)]
        rejected = [r for r in results if isinstance(r, Failure)]
        assert len(accepted) == 25
        assert all(isinstance(r.failure(), InsufficientStock) for r in rejected)
        assert _lines(usecases) == [(ESFIHAS, 25)]
