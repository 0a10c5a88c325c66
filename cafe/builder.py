"""Interactive accumulation of line items into a draft order."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Callable

from cafe.data import MenuCatalog
from cafe.errors import InvalidQuantity, InvalidSelection, OrderStateError
from cafe.models import DraftOrder, MenuItem, OrderLineItem, OrderState, Topping

logger = logging.getLogger(__name__)


@dataclass
class _PendingLine:
    item: MenuItem
    quantity: int
    variant: str | None = None
    topping: Topping | None = None
    toppings: tuple[Topping, ...] = field(default_factory=tuple)

    @property
    def complete(self) -> bool:
        if self.item.variants and self.variant is None:
            return False
        if self.toppings and self.topping is None:
            return False
        return True


class OrderBuilder:
    """
    Drive one draft order through its building states.

    States:
        EMPTY -> BUILDING -> AWAITING_CUSTOMIZATION -> BUILDING -> READY_FOR_PAYMENT -> FINALIZED

    Rejected input raises and leaves the draft exactly as it was.
    """

    def __init__(
        self,
        catalog: MenuCatalog,
        next_order_id: Callable[[], int],
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.catalog = catalog
        self._next_order_id = next_order_id
        self._clock = clock
        self.draft: DraftOrder | None = None
        self._pending: _PendingLine | None = None

    @property
    def state(self) -> OrderState:
        if self.draft is None:
            return OrderState.EMPTY
        return self.draft.state

    def start_order(self, customer_name: str) -> DraftOrder:
        if self.state not in {OrderState.EMPTY, OrderState.FINALIZED}:
            raise OrderStateError("An order is already in progress")
        self.draft = DraftOrder(
            order_id=self._next_order_id(),
            customer_name=" ".join(customer_name.split()),
            created_at=self._clock(),
        )
        self._pending = None
        logger.info("order_started order_id=%s", self.draft.order_id)
        return self.draft

    def add_line_item(self, menu_index: int, quantity: int) -> MenuItem:
        """Select a catalog item; items with variants wait for customization before they are appended."""
        draft = self._require(OrderState.BUILDING)
        size = self.catalog.size()
        if isinstance(menu_index, bool) or not isinstance(menu_index, int) or not (1 <= menu_index <= size):
            raise InvalidSelection(f"Invalid selection! Choose 1-{size}.")
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
            raise InvalidQuantity("Quantity must be a whole number of at least 1.")

        item = self.catalog.item_at(menu_index)
        pending = _PendingLine(item=item, quantity=quantity, toppings=self.catalog.toppings_for(item))
        if pending.complete:
            self._append(draft, pending)
        else:
            self._pending = pending
            draft.state = OrderState.AWAITING_CUSTOMIZATION
        return item

    def pending_variants(self) -> tuple[str, ...]:
        pending = self._require_pending()
        return pending.item.variants if pending.variant is None else ()

    def pending_toppings(self) -> tuple[Topping, ...]:
        pending = self._require_pending()
        return pending.toppings if pending.topping is None else ()

    def choose_variant(self, index: int) -> str:
        pending = self._require_pending()
        if pending.variant is not None or not pending.item.variants:
            raise OrderStateError(f"{pending.item.name} does not need a size choice")
        pending.variant = _pick(pending.item.variants, index, "size")
        self._complete_if_ready()
        return pending.variant

    def choose_topping(self, index: int) -> Topping:
        pending = self._require_pending()
        if pending.topping is not None or not pending.toppings:
            raise OrderStateError(f"{pending.item.name} does not take a topping")
        if pending.item.variants and pending.variant is None:
            raise OrderStateError("Choose a size before the topping")
        pending.topping = _pick(pending.toppings, index, "topping")
        self._complete_if_ready()
        return pending.topping

    def finish_items(self) -> DraftOrder:
        draft = self._require(OrderState.BUILDING)
        if not draft.items:
            raise OrderStateError("Cannot finish an order with no items")
        draft.state = OrderState.READY_FOR_PAYMENT
        return draft

    def cancel(self) -> None:
        if self.draft is not None and self.draft.state is not OrderState.FINALIZED:
            logger.info("order_cancelled order_id=%s", self.draft.order_id)
        self.draft = None
        self._pending = None

    def _require(self, state: OrderState) -> DraftOrder:
        if self.draft is None or self.draft.state is not state:
            raise OrderStateError(f"Expected order state {state.value}, got {self.state.value}")
        return self.draft

    def _require_pending(self) -> _PendingLine:
        self._require(OrderState.AWAITING_CUSTOMIZATION)
        if self._pending is None:
            raise OrderStateError("No item is waiting for customization")
        return self._pending

    def _complete_if_ready(self) -> None:
        pending = self._pending
        if pending is None or not pending.complete:
            return
        draft = self._require(OrderState.AWAITING_CUSTOMIZATION)
        self._append(draft, pending)
        self._pending = None
        draft.state = OrderState.BUILDING

    def _append(self, draft: DraftOrder, pending: _PendingLine) -> None:
        customizations: list[str] = []
        if pending.variant is not None:
            customizations.append(pending.variant)
        if pending.topping is not None:
            customizations.append(pending.topping.label)
        line = OrderLineItem(
            category=pending.item.category,
            name=pending.item.name,
            unit_price=pending.item.price,
            quantity=pending.quantity,
            customizations=tuple(customizations),
            topping_surcharge=pending.topping.surcharge if pending.topping is not None else Decimal("0"),
        )
        draft.items.append(line)
        logger.info("line_added order_id=%s item=%r qty=%s", draft.order_id, line.name, line.quantity)


def _pick(options, index: int, what: str):
    if isinstance(index, bool) or not isinstance(index, int) or not (1 <= index <= len(options)):
        raise InvalidSelection(f"Invalid {what} choice! Choose 1-{len(options)}.")
    return options[index - 1]
