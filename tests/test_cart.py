import pytest

from cart import Cart, shipping_for


@pytest.fixture
def catalog(storage):
    return storage.catalog


def test_subtotal_and_free_shipping(catalog):
    cart = Cart(threshold=2999, fee=199)
    cart.add(catalog.get_by_id("1"), 1)
    cart.add(catalog.get_by_id("3"), 2)
    assert cart.total_items == 3
    assert cart.subtotal == 23997
    assert cart.shipping == 0
    assert cart.total == 23997


def test_repeat_add_merges_by_product(catalog):
    cart = Cart(threshold=2999, fee=199)
    first = cart.add(catalog.get_by_id("3"))
    again = cart.add(catalog.get_by_id("3"), 2)
    assert again is first
    assert len(cart.items) == 1
    assert cart.items[0].quantity == 3


def test_quantity_zero_removes_line(catalog):
    cart = Cart(threshold=2999, fee=199)
    item = cart.add(catalog.get_by_id("3"))
    cart.update_quantity(item.id, 4)
    assert cart.total_items == 4
    cart.update_quantity(item.id, 0)
    assert cart.items == []


def test_remove_and_clear(catalog):
    cart = Cart(threshold=2999, fee=199)
    a = cart.add(catalog.get_by_id("1"))
    cart.add(catalog.get_by_id("2"))
    cart.remove(a.id)
    assert [i.product_id for i in cart.items] == ["2"]
    cart.clear()
    assert cart.subtotal == 0


def test_order_items_snapshot(catalog):
    cart = Cart(threshold=2999, fee=199)
    cart.add(catalog.get_by_id("1"), 2)
    (item,) = cart.order_items()
    assert item.product_id == "1"
    assert item.name == "Royal Banarasi Silk Saree"
    assert item.price == 15999
    assert item.quantity == 2
    assert item.image.startswith("https://")


@pytest.mark.parametrize("subtotal,expected", [
    (2998, 199),
    (2999, 0),
    (3499, 0),
    (0, 199),
])
def test_shipping_threshold(subtotal, expected):
    assert shipping_for(subtotal, threshold=2999, fee=199) == expected


def test_threshold_and_fee_are_per_cart(catalog):
    cart = Cart(threshold=50000, fee=500)
    cart.add(catalog.get_by_id("1"), 1)
    cart.add(catalog.get_by_id("3"), 2)
    assert cart.subtotal == 23997
    assert cart.shipping == 500
    assert cart.total == 24497
