"""Subtotal, tax, donation and total computation."""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

from cafe.config import CafeConfig
from cafe.errors import InvalidSelection, OrderStateError
from cafe.models import DraftOrder, Order, OrderLineItem, OrderState, OrderTotals, PaymentMethod
from cafe.parsing import parse_int

logger = logging.getLogger(__name__)

_CENT = Decimal("0.01")


def money(amount: Decimal) -> Decimal:
    """Round half-up to 2 decimals. Only used for display and the durable log."""
    return Decimal(amount).quantize(_CENT, rounding=ROUND_HALF_UP)


def format_money(amount: Decimal, currency: str) -> str:
    return f"{currency}{money(amount)}"


def parse_payment_choice(choice: PaymentMethod | int | str) -> PaymentMethod:
    """Map 1/2/3 to Cash/Card/Online. Anything else is rejected rather than defaulted."""
    if isinstance(choice, PaymentMethod):
        return choice
    if isinstance(choice, str):
        choice = parse_int(choice)
    if isinstance(choice, bool) or not isinstance(choice, int):
        raise InvalidSelection(f"Unknown payment choice: {choice!r}")
    try:
        return PaymentMethod(choice)
    except ValueError as exc:
        raise InvalidSelection(f"Invalid payment choice! Choose 1-{len(PaymentMethod)}.") from exc


class PricingEngine:
    """Deterministic pricing for a draft order using the configured tax rate and donation."""

    def __init__(self, config: CafeConfig) -> None:
        self.tax_rate = config.tax_rate
        self.donation_amount = config.donation_amount
        self.charge_toppings = config.charge_toppings

    def subtotal(self, items: Iterable[OrderLineItem]) -> Decimal:
        return sum((item.line_amount(self.charge_toppings) for item in items), Decimal("0"))

    def compute_totals(self, draft: DraftOrder, donate: bool = False) -> OrderTotals:
        subtotal = self.subtotal(draft.items)
        # Kept at full precision; money() is applied when amounts are shown.
        tax = subtotal * self.tax_rate
        donation = self.donation_amount if donate else Decimal("0")
        return OrderTotals(subtotal=subtotal, tax=tax, donation=donation, total=subtotal + tax + donation)

    def set_payment_method(
        self,
        draft: DraftOrder,
        totals: OrderTotals,
        choice: PaymentMethod | int | str,
    ) -> Order:
        """Record the payment method and freeze the draft into a finalized Order."""
        if draft.state is not OrderState.READY_FOR_PAYMENT:
            raise OrderStateError(f"Order {draft.order_id} is not ready for payment ({draft.state.value})")
        method = parse_payment_choice(choice)
        if totals.donation not in (Decimal("0"), self.donation_amount):
            raise OrderStateError(f"Donation for order {draft.order_id} must be 0 or {self.donation_amount}")
        if totals != self.compute_totals(draft, donate=totals.donation != 0):
            raise OrderStateError(f"Totals for order {draft.order_id} are stale; recompute before payment")

        order = Order(
            order_id=draft.order_id,
            customer_name=draft.customer_name,
            created_at=draft.created_at,
            items=tuple(draft.items),
            subtotal=totals.subtotal,
            tax=totals.tax,
            donation=totals.donation,
            total=totals.total,
            payment_method=method,
            is_paid=True,
        )
        draft.state = OrderState.FINALIZED
        logger.info(
            "order_finalized order_id=%s total=%s payment=%s",
            order.order_id,
            money(order.total),
            method.label,
        )
        return order
