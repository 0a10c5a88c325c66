from decimal import Decimal

import pytest

from cafe.data import MenuCatalog, load_catalog
from cafe.errors import NotFound
from cafe.models import MenuItem


def test_default_catalog(catalog):
    items = catalog.list_items()
    assert len(items) == 9
    assert items[0] == MenuItem(
        category="Ice Cream",
        name="Chocolate Dream",
        price=Decimal("100"),
        description="Rich chocolate ice cream",
        variants=("Single Scoop", "Double Scoop", "Triple Scoop"),
    )
    assert catalog.categories() == ["Ice Cream", "Shakes", "Desserts", "Beverages"]


@pytest.mark.parametrize("index", [0, 10, -1])
def test_item_at_out_of_range(catalog, index):
    with pytest.raises(NotFound):
        catalog.item_at(index)


def test_only_ice_cream_takes_toppings(catalog):
    assert len(catalog.toppings_for(catalog.item_at(1))) == 7
    assert catalog.toppings_for(catalog.item_at(5)) == ()


def test_items_are_grouped_by_category_in_first_seen_order():
    catalog = MenuCatalog(
        [
            MenuItem("Drinks", "Tea", Decimal("1")),
            MenuItem("Food", "Toast", Decimal("2")),
            MenuItem("Drinks", "Juice", Decimal("3")),
        ]
    )
    assert [item.name for item in catalog.list_items()] == ["Tea", "Juice", "Toast"]
    assert catalog.item_at(2).name == "Juice"


def test_duplicate_names_are_refused():
    with pytest.raises(ValueError):
        MenuCatalog([MenuItem("A", "Tea", Decimal("1")), MenuItem("B", "Tea", Decimal("1"))])


def test_negative_price_is_refused():
    with pytest.raises(ValueError):
        MenuCatalog([MenuItem("A", "Tea", Decimal("-1"))])


def test_catalog_is_rebuilt_independently():
    assert load_catalog().list_items() == load_catalog().list_items()
