"""
Tests for the observable cart store.
"""
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from beautiful_dogs.cart import Cart, CartEntry, to_price


class TestAdd:
    def test_add_creates_entry(self, cart):
        entry = cart.add("Rex", 10)

        assert cart.count == 1
        assert entry.name == "Rex"
        assert entry.price == Decimal("10")
        assert cart.entries == (entry,)

    def test_add_same_name_is_idempotent(self, cart):
        first = cart.add("Rex", 10.0)
        second = cart.add("Rex", 20.0)

        assert cart.count == 1
        assert second is first
        assert cart.entry_for("Rex").price == Decimal("10.0")

    def test_entries_keep_insertion_order(self, cart):
        for name in ("Rex", "Bella", "Max"):
            cart.add(name, 5)

        assert [e.name for e in cart.entries] == ["Rex", "Bella", "Max"]

    def test_fresh_ids(self, cart):
        a = cart.add("Rex", 1)
        b = cart.add("Bella", 1)
        assert a.id != b.id

    def test_invalid_price_rejected(self, cart):
        with pytest.raises(ValueError):
            cart.add("Rex", "cheap")
        assert cart.count == 0


class TestRemove:
    def test_remove_entry(self, cart):
        entry = cart.add("Rex", 10)
        cart.remove(entry)

        assert cart.count == 0
        assert not cart.contains("Rex")

    def test_remove_absent_is_noop(self, cart):
        cart.add("Rex", 10)
        cart.remove(CartEntry(name="Rex", price=Decimal("10")))

        assert cart.count == 1

    def test_remove_then_add_gets_new_identity(self, cart):
        original = cart.add("Rex", 10)
        cart.remove(original)
        again = cart.add("Rex", 10)

        assert again.id != original.id
        assert cart.entry_for("Rex") is again


class TestUpdatePrice:
    def test_update_price(self, cart):
        entry = cart.add("Rex", 10)
        cart.update_price(entry, "12.50")

        assert cart.entry_for("Rex").price == Decimal("12.50")

    def test_update_to_equal_amount_stores_new_value(self, cart):
        entry = cart.add("Rex", 10)
        handler = MagicMock()
        cart.on_changed.connect(handler)

        cart.update_price(entry, "10.00")

        assert str(cart.entry_for("Rex").price) == "10.00"
        handler.assert_not_called()

    def test_update_absent_leaves_cart_unchanged(self, cart):
        cart.add("Rex", 10)
        before = [(e.id, e.name, e.price) for e in cart.entries]

        cart.update_price(CartEntry(name="Ghost", price=Decimal("1")), 99)

        assert [(e.id, e.name, e.price) for e in cart.entries] == before

    def test_update_removed_entry_is_noop(self, cart):
        entry = cart.add("Rex", 10)
        cart.remove(entry)
        cart.update_price(entry, 30)

        assert cart.count == 0


class TestNotifications:
    def test_every_mutation_notifies(self, cart):
        handler = MagicMock()
        cart.on_changed.connect(handler)

        entry = cart.add("Rex", 10)
        cart.update_price(entry, 11)
        cart.remove(entry)

        assert handler.call_count == 3
        handler.assert_called_with(cart)

    def test_noops_do_not_notify(self, cart):
        entry = cart.add("Rex", 10)
        handler = MagicMock()
        cart.on_changed.connect(handler)

        cart.add("Rex", 99)
        cart.update_price(entry, 10)
        cart.remove(CartEntry(name="Ghost", price=Decimal("1")))
        cart.update_price(CartEntry(name="Ghost", price=Decimal("1")), 5)

        handler.assert_not_called()

    def test_subscriber_sees_new_count(self, cart):
        counts = []
        cart.on_changed.connect(lambda c: counts.append(c.count))

        cart.add("Rex", 1)
        cart.add("Bella", 1)
        cart.remove(cart.entry_for("Rex"))

        assert counts == [1, 2, 1]


class TestHelpers:
    def test_toggle(self, cart):
        assert cart.toggle("Rex", 10) is True
        assert cart.contains("Rex")
        assert cart.toggle("Rex", 10) is False
        assert not cart.contains("Rex")

    def test_total(self, cart):
        cart.add("Rex", "10.00")
        cart.add("Bella", 2.5)

        assert cart.total == Decimal("12.50")

    def test_total_of_empty_cart(self, cart):
        assert cart.total == Decimal("0")

    def test_clear(self, cart):
        handler = MagicMock()
        cart.add("Rex", 1)
        cart.add("Bella", 1)
        cart.on_changed.connect(handler)

        cart.clear()
        cart.clear()

        assert cart.count == 0
        handler.assert_called_once_with(cart)


def test_count_tracks_distinct_names(cart):
    for name in ["Rex", "Bella", "Rex", "Max", "Bella"]:
        cart.add(name, 1)
    cart.remove(cart.entry_for("Max"))

    assert cart.count == 2
    assert len(cart) == 2


def test_rex_scenario(cart):
    cart.add("Rex", 10.0)
    assert cart.count == 1

    cart.add("Rex", 20.0)
    assert cart.count == 1
    assert cart.entry_for("Rex").price == Decimal("10.0")

    cart.update_price(cart.entry_for("Rex"), 20.0)
    assert cart.entry_for("Rex").price == Decimal("20.0")

    cart.remove(cart.entry_for("Rex"))
    assert cart.count == 0


@pytest.mark.parametrize("value, expected", [
    (10, Decimal("10")),
    (10.0, Decimal("10.0")),
    (0.1, Decimal("0.1")),
    ("3.99", Decimal("3.99")),
    (Decimal("7.5"), Decimal("7.5")),
])
def test_to_price_accepts(value, expected):
    assert to_price(value) == expected


@pytest.mark.parametrize("value", ["abc", None, -1, "-0.01", True, "NaN", float("inf")])
def test_to_price_rejects(value):
    with pytest.raises(ValueError):
        to_price(value)


def test_entries_compare_by_identity():
    a = CartEntry(name="Rex", price=Decimal("1"))
    b = CartEntry(name="Rex", price=Decimal("1"))

    assert a != b
    assert a == CartEntry(name="Other", price=Decimal("2"), id=a.id)
