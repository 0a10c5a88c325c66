"""Rendering helpers for menus, receipts and reports."""

from __future__ import annotations

from datetime import date, datetime
from typing import Sequence

from rich.text import Text

from cafe.config import CafeConfig
from cafe.constant import CATEGORY_BADGE_STYLES, MAIN_MENU_OPTIONS
from cafe.data import MenuCatalog
from cafe.models import Order, OrderLineItem, Topping
from cafe.persistence import OrderStore
from cafe.pricing import format_money

_DEFAULT_BADGE_STYLE = "bold #ffffff on #555555"


def badge_style(category: str) -> str:
    """Return a consistent badge style for category tags."""
    return CATEGORY_BADGE_STYLES.get(category, _DEFAULT_BADGE_STYLE)


def format_line_label(line: OrderLineItem) -> Text:
    """Render a line item with its colored category tag."""
    text = Text()
    text.append(f" {line.category} ", style=badge_style(line.category))
    text.append(f" {line.name} x{line.quantity}")
    return text


def render_main_menu() -> Text:
    text = Text()
    for idx, (key, label) in enumerate(MAIN_MENU_OPTIONS.items()):
        if idx > 0:
            text.append("\n")
        text.append(f"[{key}] ", style="bold")
        text.append(label)
    return text


def render_menu(catalog: MenuCatalog, currency: str) -> Text:
    """Category-grouped menu listing."""
    text = Text()
    current_category = ""
    for item in catalog.list_items():
        if item.category != current_category:
            if current_category:
                text.append("\n")
            current_category = item.category
            text.append(f" {current_category} ", style=badge_style(current_category))
            text.append("\n")
        text.append(f"{item.name:<26}", style="bold")
        text.append(f"{format_money(item.price, currency):>12}\n")
        if item.description:
            text.append(f"  {item.description}\n", style="dim")
    return text


def render_selection_menu(catalog: MenuCatalog, currency: str) -> Text:
    """Numbered list used when picking an item for an order."""
    text = Text()
    for idx, item in enumerate(catalog.list_items(), start=1):
        if idx > 1:
            text.append("\n")
        text.append(f"{idx:>3}. ")
        text.append(f"{item.name:<25}")
        text.append(format_money(item.price, currency))
    return text


def render_options(options: Sequence[str]) -> Text:
    text = Text()
    for idx, option in enumerate(options, start=1):
        if idx > 1:
            text.append("\n")
        text.append(f"  {idx}. {option}")
    return text


def topping_labels(toppings: Sequence[Topping], currency: str) -> list[str]:
    labels = []
    for topping in toppings:
        if topping.surcharge > 0:
            labels.append(f"{topping.label} ({currency}{topping.surcharge})")
        else:
            labels.append(topping.label)
    return labels


def _two_col(left: str, right: str, width: int) -> str:
    room = max(1, width - len(right) - 1)
    if len(left) > room:
        left = left[: max(1, room - 1)] + "…"
    return f"{left:<{room}} {right}"


def receipt_lines(order: Order, config: CafeConfig) -> list[str]:
    """Plain receipt lines, shared by the screen and the thermal printer."""
    width = config.receipt_width
    rule = "-" * width
    currency = config.currency
    lines = [
        f"{config.shop_name} - RECEIPT".center(width).rstrip(),
        config.shop_address.center(width).rstrip(),
        config.shop_phone.center(width).rstrip(),
        rule,
        f"Order #: {order.order_id}",
        f"Customer: {order.customer_name}",
        f"Time: {order.created_at:%Y-%m-%d %H:%M:%S}",
        rule,
    ]
    for item in order.items:
        amount = item.line_amount(config.charge_toppings)
        lines.append(_two_col(f"{item.name} x{item.quantity}", format_money(amount, currency), width))
        for detail in item.customizations:
            lines.append(f"   + {detail}")
    lines.append(rule)
    lines.append(_two_col("Subtotal:", format_money(order.subtotal, currency), width))
    lines.append(_two_col(f"Tax ({config.tax_percent_label}):", format_money(order.tax, currency), width))
    if order.donation > 0:
        lines.append(_two_col("Donation:", format_money(order.donation, currency), width))
    lines.append(_two_col("TOTAL:", format_money(order.total, currency), width))
    lines.append(_two_col("Payment:", order.payment_method.label, width))
    lines.append(_two_col("Status:", order.status, width))
    lines.append(rule)
    return lines


def render_receipt(order: Order, config: CafeConfig) -> Text:
    text = Text()
    for idx, line in enumerate(receipt_lines(order, config)):
        if idx > 0:
            text.append("\n")
        if idx == 0:
            text.append(line, style="bold yellow")
        elif line.startswith("TOTAL:"):
            text.append(line, style="bold")
        else:
            text.append(line)
    return text


def render_report(store: OrderStore, config: CafeConfig, today: date | datetime | None = None) -> Text:
    text = Text()
    text.append("Total Daily Revenue: ", style="bold")
    text.append(format_money(store.daily_revenue(today), config.currency))
    text.append("\n")
    text.append("Total Orders stored in RAM: ", style="bold")
    text.append(str(store.order_count()))
    orders = store.orders()
    if orders:
        text.append("\n\n")
        for idx, order in enumerate(orders):
            if idx > 0:
                text.append("\n")
            text.append(
                f"#{order.order_id}  {order.created_at:%H:%M}  {order.customer_name or '-':<16} "
                f"{format_money(order.total, config.currency):>12}  {order.payment_method.label}"
            )
    return text


def render_feedback(lines: Sequence[str]) -> Text:
    if not lines:
        return Text("(no feedback yet)", style="dim")
    return Text("\n".join(lines))
