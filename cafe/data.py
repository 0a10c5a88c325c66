"""Static menu catalog."""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable, Mapping

from cafe.constant import MENU_ROWS, TOPPING_CATEGORIES, TOPPING_ROWS
from cafe.errors import NotFound
from cafe.models import MenuItem, Topping


class MenuCatalog:
    """Read-only, category-grouped list of menu items with 1-based lookup."""

    def __init__(
        self,
        items: Iterable[MenuItem],
        toppings: Iterable[Topping] = (),
        topping_categories: Iterable[str] = (),
    ) -> None:
        self._items = _group_by_category(items)
        names = [item.name for item in self._items]
        if len(set(names)) != len(names):
            raise ValueError("Menu item names must be unique")
        for item in self._items:
            if item.price < 0:
                raise ValueError(f"Menu item {item.name!r} has a negative price")
        self._toppings = tuple(toppings)
        self._topping_categories = frozenset(topping_categories)

    def __len__(self) -> int:
        return len(self._items)

    def size(self) -> int:
        return len(self._items)

    def list_items(self) -> tuple[MenuItem, ...]:
        return self._items

    def item_at(self, index: int) -> MenuItem:
        """Return the item for a 1-based operator selection."""
        if isinstance(index, bool) or not isinstance(index, int) or not (1 <= index <= len(self._items)):
            raise NotFound(f"Invalid selection! Choose 1-{len(self._items)}.")
        return self._items[index - 1]

    def categories(self) -> list[str]:
        seen: list[str] = []
        for item in self._items:
            if item.category not in seen:
                seen.append(item.category)
        return seen

    def has_toppings(self, item: MenuItem) -> bool:
        return item.category in self._topping_categories and bool(self._toppings)

    def toppings_for(self, item: MenuItem) -> tuple[Topping, ...]:
        if not self.has_toppings(item):
            return ()
        return self._toppings


def _group_by_category(items: Iterable[MenuItem]) -> tuple[MenuItem, ...]:
    # Stable: categories keep first-seen order, items keep their order within a category.
    buckets: dict[str, list[MenuItem]] = {}
    for item in items:
        buckets.setdefault(item.category, []).append(item)
    return tuple(item for bucket in buckets.values() for item in bucket)


def menu_item_from_row(row: Mapping[str, object]) -> MenuItem:
    return MenuItem(
        category=str(row["category"]),
        name=str(row["name"]),
        price=Decimal(str(row["price"])),
        description=str(row.get("description", "")),
        variants=tuple(str(option) for option in row.get("options", ())),  # type: ignore[union-attr]
    )


def load_catalog() -> MenuCatalog:
    """Build the catalog from the canonical rows in cafe.constant."""
    return MenuCatalog(
        items=[menu_item_from_row(row) for row in MENU_ROWS],
        toppings=[Topping(label, Decimal(surcharge)) for label, surcharge in TOPPING_ROWS.items()],
        topping_categories=TOPPING_CATEGORIES,
    )
