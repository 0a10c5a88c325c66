"""Domain models for the cafe till."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum


@dataclass(frozen=True)
class MenuItem:
    """A purchasable catalog entry."""

    category: str
    name: str
    price: Decimal
    description: str = ""
    variants: tuple[str, ...] = ()


@dataclass(frozen=True)
class Topping:
    label: str
    surcharge: Decimal = Decimal("0")


class OrderState(Enum):
    EMPTY = "empty"
    BUILDING = "building"
    AWAITING_CUSTOMIZATION = "awaiting_customization"
    READY_FOR_PAYMENT = "ready_for_payment"
    FINALIZED = "finalized"


class PaymentMethod(Enum):
    CASH = 1
    CARD = 2
    ONLINE = 3

    @property
    def label(self) -> str:
        return self.name.title()


@dataclass(frozen=True)
class OrderLineItem:
    """A line copied from the catalog at selection time."""

    category: str
    name: str
    unit_price: Decimal
    quantity: int
    customizations: tuple[str, ...] = ()
    topping_surcharge: Decimal = Decimal("0")

    def line_amount(self, charge_toppings: bool = False) -> Decimal:
        unit = self.unit_price
        if charge_toppings:
            unit += self.topping_surcharge
        return unit * self.quantity


@dataclass
class DraftOrder:
    """An order still being built; only the OrderBuilder mutates it."""

    order_id: int
    customer_name: str
    created_at: datetime
    items: list[OrderLineItem] = field(default_factory=list)
    state: OrderState = OrderState.BUILDING


@dataclass(frozen=True)
class OrderTotals:
    subtotal: Decimal
    tax: Decimal
    donation: Decimal
    total: Decimal


@dataclass(frozen=True)
class Order:
    """A finalized order. Totals and lines are frozen."""

    order_id: int
    customer_name: str
    created_at: datetime
    items: tuple[OrderLineItem, ...]
    subtotal: Decimal
    tax: Decimal
    donation: Decimal
    total: Decimal
    payment_method: PaymentMethod
    is_paid: bool = True

    @property
    def status(self) -> str:
        return "Paid" if self.is_paid else "Pending"
