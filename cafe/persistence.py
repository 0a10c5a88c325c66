"""Append-only text persistence for finalized orders and customer feedback."""

from __future__ import annotations

import logging
from datetime import date, datetime
from decimal import Decimal
from pathlib import Path

from cafe.config import CURRENCY_SYMBOL, ORDER_ID_BASE
from cafe.errors import NotFound, OrderStateError, PersistenceFailure
from cafe.models import Order
from cafe.pricing import format_money

logger = logging.getLogger(__name__)

RECORD_SEPARATOR = "-" * 40


def format_order_record(order: Order, currency: str = CURRENCY_SYMBOL) -> str:
    """Render one human-readable record block for the durable order log."""
    lines = [
        f"Order ID: {order.order_id}",
        f"Customer: {_single_line(order.customer_name)}",
        f"Time: {order.created_at.ctime()}",
        "Items:",
    ]
    for item in order.items:
        lines.append(f"  - {item.name} x{item.quantity} @ {format_money(item.unit_price, currency)}")
    lines.extend(
        [
            f"Subtotal: {format_money(order.subtotal, currency)}",
            f"Tax: {format_money(order.tax, currency)}",
            f"Donation: {format_money(order.donation, currency)}",
            f"Total: {format_money(order.total, currency)}",
            f"Payment: {order.payment_method.label}",
            f"Status: {order.status}",
            RECORD_SEPARATOR,
        ]
    )
    return "\n".join(lines) + "\n"


def _append_text(path: Path, text: str) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("a", encoding="utf-8") as fh:
            fh.write(text)
    except OSError as exc:
        raise PersistenceFailure(f"Could not write {path}: {exc}") from exc


class OrderStore:
    """
    Finalized orders for this process, mirrored to an append-only log file.

    The log is write-only: orders from previous runs are not read back, so
    daily_revenue() and order_count() only cover the current process and ids
    restart at the base on every launch.
    """

    def __init__(self, log_path: Path, order_id_base: int = ORDER_ID_BASE, currency: str = CURRENCY_SYMBOL) -> None:
        self.log_path = Path(log_path)
        self.currency = currency
        self._next_id = order_id_base
        self._orders: list[Order] = []
        self._persisted_ids: set[int] = set()

    def next_order_id(self) -> int:
        order_id = self._next_id
        self._next_id += 1
        return order_id

    def persist(self, order: Order) -> None:
        """Write the durable record, then keep the order in memory. Nothing is kept if the write fails."""
        if not order.is_paid:
            raise OrderStateError(f"Order {order.order_id} is not paid")
        if order.order_id in self._persisted_ids:
            raise OrderStateError(f"Order {order.order_id} was already saved")

        _append_text(self.log_path, format_order_record(order, self.currency))
        self._orders.append(order)
        self._persisted_ids.add(order.order_id)
        logger.info("order_saved order_id=%s path=%s", order.order_id, self.log_path)

    def orders(self) -> tuple[Order, ...]:
        return tuple(self._orders)

    def order_count(self) -> int:
        return len(self._orders)

    def daily_revenue(self, reference_date: date | datetime | None = None) -> Decimal:
        if reference_date is None:
            reference_date = datetime.now()
        day = reference_date.date() if isinstance(reference_date, datetime) else reference_date
        return sum((order.total for order in self._orders if order.created_at.date() == day), Decimal("0"))


class FeedbackLog:
    """Plain text feedback lines: ``[timestamp] name: message``."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def append(self, name: str, message: str, now: datetime | None = None) -> str:
        stamp = (now or datetime.now()).strftime("%Y-%m-%d %H:%M:%S")
        # Keep one entry per line.
        entry = f"[{stamp}] {_single_line(name)}: {_single_line(message)}"
        _append_text(self.path, entry + "\n")
        logger.info("feedback_saved path=%s", self.path)
        return entry

    def read_lines(self) -> list[str]:
        try:
            with self.path.open("r", encoding="utf-8") as fh:
                return fh.read().splitlines()
        except FileNotFoundError as exc:
            raise NotFound("No feedback found.") from exc
        except OSError as exc:
            raise PersistenceFailure(f"Could not read {self.path}: {exc}") from exc


def _single_line(text: str) -> str:
    return " ".join(text.split())
