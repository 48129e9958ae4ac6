"""
Cart aggregation: add/remove/quantity, totals, the empty-order rule.
"""

from decimal import Decimal

import pytest
from hypothesis import given, strategies as st

from orderkit.cart import (
    EMPTY_SNAPSHOT,
    Cart,
    LineItem,
    check_quantity,
    make_line_item,
    summarize,
    summarize_options,
)
from orderkit.config import CartConfig
from orderkit.pricing import compute_price

from tests.helpers import make_item, prices, quantities


class TestCheckout:
    def test_worked_example(self, sauce_only, cart):
        bbq = compute_price(sauce_only, {"sauce": ["bbq"]})
        pizzas = make_line_item(sauce_only, {"sauce": ["bbq"]}, bbq.unit_price, 2)
        salad = make_item(15, product_id="salad")

        cart.add(pizzas)
        snap = cart.add(salad)
        assert snap.subtotal == Decimal(57)
        assert snap.delivery_fee == Decimal(5)
        assert snap.grand_total == Decimal(62)
        assert snap.total_count == 3

        cart.remove(pizzas)
        snap = cart.remove(salad)
        assert snap.subtotal == 0
        assert snap.delivery_fee == 0
        assert snap.grand_total == 0
        assert snap.total_count == 0

    def test_starts_empty(self):
        assert Cart().snapshot() == EMPTY_SNAPSHOT
        assert len(Cart()) == 0

    def test_default_delivery_fee(self):
        assert Cart().add(make_item(10)).delivery_fee == Decimal(20)

    def test_keeps_insertion_order(self, cart):
        a, b, c = make_item(1, product_id="a"), make_item(2, product_id="b"), make_item(3, product_id="c")
        for item in (a, b, c):
            cart.add(item)
        assert [i.product_id for i in cart] == ["a", "b", "c"]
        assert cart.snapshot().line_items == (a, b, c)


class TestRemove:
    def test_identical_items_are_distinct_entries(self, cart):
        first = make_item(10)
        second = make_item(10)
        cart.add(first)
        cart.add(second)
        snap = cart.remove(second)
        assert snap.line_items == (first,)
        assert first in cart
        assert second not in cart

    def test_removing_absent_item_is_a_no_op(self, cart):
        item = make_item(10)
        cart.add(item)
        before = cart.snapshot()
        assert cart.remove(make_item(10)) is before
        assert len(cart) == 1

    def test_duplicate_remove_is_harmless(self, cart):
        item = make_item(10)
        cart.add(item)
        cart.remove(item)
        assert cart.remove(item) == EMPTY_SNAPSHOT


class TestSetQuantity:
    def test_recomputes_totals(self, cart):
        item = make_item(7)
        cart.add(item)
        snap = cart.set_quantity(item, 4)
        assert item.quantity == 4
        assert snap.subtotal == Decimal(28)
        assert snap.grand_total == Decimal(33)
        assert snap.total_count == 4

    def test_earlier_snapshot_keeps_its_quantities(self, cart):
        item = make_item(10)
        old = cart.add(item)
        cart.set_quantity(item, 3)

        assert old.lines[0].quantity == 1
        assert old.lines[0].total_price == Decimal(10)
        assert sum(line.total_price for line in old.lines) == old.subtotal
        assert cart.snapshot().lines[0].quantity == 3

    def test_absent_item_is_ignored(self, cart):
        stray = make_item(7)
        cart.set_quantity(stray, 3)
        assert stray.quantity == 1
        assert cart.snapshot() == EMPTY_SNAPSHOT

    @pytest.mark.parametrize("quantity", [0, -1, 1.5, "2", True])
    def test_rejects_invalid_quantity(self, cart, quantity):
        item = make_item(7)
        cart.add(item)
        with pytest.raises(ValueError):
            cart.set_quantity(item, quantity)
        assert item.quantity == 1

    def test_quantity_is_read_only_on_the_item(self):
        item = make_item(7)
        with pytest.raises(AttributeError):
            item.quantity = 3  # type: ignore[misc]


class TestClear:
    def test_clear(self, cart):
        cart.add(make_item(10))
        cart.add(make_item(20))
        assert cart.clear() == EMPTY_SNAPSHOT
        assert list(cart) == []


class TestZeroSubtotal:
    def test_free_items_pay_no_delivery(self, cart):
        snap = cart.add(make_item(0, quantity=3))
        assert snap.delivery_fee == 0
        assert snap.grand_total == 0
        assert snap.total_count == 3

    def test_negative_lines_cancelling_out(self, cart):
        cart.add(make_item(5))
        snap = cart.add(make_item(-5))
        assert snap.subtotal == 0
        assert snap.grand_total == 0

    def test_summarize_directly(self):
        totals = summarize([make_item(3, 2)], Decimal("2.50"))
        assert totals.grand_total == Decimal("8.50")
        assert not totals.is_empty


class TestLineItem:
    def test_rejects_bad_quantity(self):
        with pytest.raises(ValueError):
            make_item(10, quantity=0)

    def test_check_quantity(self):
        assert check_quantity(3) == 3
        with pytest.raises(ValueError):
            check_quantity(False)

    def test_total_price(self):
        assert make_item("2.25", quantity=4).total_price == Decimal(9)

    def test_identity_equality(self):
        assert make_item(1) != make_item(1)

    def test_options_summary(self, pizza):
        summary = summarize_options(pizza, {"sauce": ["bbq"], "toppings": ["pesto"]})
        assert list(summary) == ["sauce", "toppings"]
        assert summary["sauce"].label == "Sauce"
        assert dict(summary["sauce"].options) == {"bbq": "BBQ"}
        assert dict(summary["toppings"].options) == {}

    def test_make_line_item_takes_price_as_given(self, pizza):
        item = make_line_item(pizza, {}, Decimal(99), 2)
        assert isinstance(item, LineItem)
        assert item.product_id == "pizza"
        assert item.name == "Nonna Alba's Pizza"
        assert item.total_price == Decimal(198)


# ============================================================================
# Properties
# ============================================================================


@given(
    st.lists(st.tuples(prices, quantities), max_size=8),
    st.integers(min_value=0, max_value=30),
)
def test_totals_are_the_sum_of_lines(lines, fee):
    cart = Cart(CartConfig(delivery_fee=Decimal(fee)))
    for unit_price, quantity in lines:
        cart.add(make_item(unit_price, quantity))

    snap = cart.snapshot()
    subtotal = sum((Decimal(p) * q for p, q in lines), Decimal(0))
    assert snap.subtotal == subtotal
    assert snap.total_count == sum(q for _, q in lines)
    if subtotal == 0:
        assert snap.delivery_fee == 0
        assert snap.grand_total == 0
    else:
        assert snap.grand_total == subtotal + fee


@given(st.lists(st.tuples(prices, quantities), min_size=1, max_size=6), st.data())
def test_add_then_remove_restores_totals(lines, data):
    cart = Cart(CartConfig(delivery_fee=Decimal(5)))
    for unit_price, quantity in lines:
        cart.add(make_item(unit_price, quantity))
    before = cart.snapshot().totals

    extra = make_item(data.draw(prices), data.draw(quantities))
    cart.add(extra)
    assert cart.remove(extra).totals == before


cart_ops = st.lists(
    st.one_of(
        st.tuples(st.just("add"), prices, quantities),
        st.tuples(st.just("remove"), st.integers(min_value=0, max_value=9)),
        st.tuples(st.just("quantity"), st.integers(min_value=0, max_value=9), quantities),
    ),
    max_size=25,
)


@given(cart_ops)
def test_totals_track_interleaved_mutations(ops):
    cart = Cart(CartConfig(delivery_fee=Decimal(5)))
    held: list[LineItem] = []

    for op in ops:
        match op:
            case ("add", unit_price, quantity):
                item = make_item(unit_price, quantity)
                held.append(item)
                snap = cart.add(item)
            case ("remove", index):
                # indexes past the end hit a stray item: a no-op
                target = held.pop(index) if index < len(held) else make_item(1)
                snap = cart.remove(target)
            case ("quantity", index, quantity):
                target = held[index] if index < len(held) else make_item(1)
                snap = cart.set_quantity(target, quantity)

        assert snap.line_items == tuple(held)
        assert snap.subtotal == sum((i.unit_price * i.quantity for i in held), Decimal(0))
        assert snap.total_count == sum(i.quantity for i in held)
        if snap.subtotal == 0:
            assert snap.grand_total == 0
        else:
            assert snap.grand_total == snap.subtotal + 5
