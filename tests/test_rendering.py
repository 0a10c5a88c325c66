from dataclasses import replace
from decimal import Decimal

from cafe.rendering import (
    render_feedback,
    render_menu,
    render_receipt,
    render_report,
    render_selection_menu,
    receipt_lines,
    topping_labels,
)


def test_receipt_lines(config, place_order):
    lines = receipt_lines(place_order(quantity=2), config)
    assert lines[0].strip() == "Rukaab Cafe & Ice Cream - RECEIPT"
    assert "Order #: 1001" in lines
    assert "Customer: Ali" in lines
    assert "   + Single Scoop" in lines
    assert "   + No Topping" in lines
    item_line = next(line for line in lines if line.startswith("Chocolate Dream x2"))
    assert item_line.endswith("Rs.200.00")
    assert any(line.startswith("Tax (13%):") and line.endswith("Rs.26.00") for line in lines)
    assert any(line.startswith("TOTAL:") and line.endswith("Rs.226.00") for line in lines)
    assert not any(line.startswith("Donation:") for line in lines)
    assert all(len(line) <= config.receipt_width for line in lines)


def test_receipt_shows_donation_when_given(config, place_order):
    lines = receipt_lines(place_order(quantity=1, donate=True), config)
    assert any(line.startswith("Donation:") and line.endswith("Rs.100.00") for line in lines)
    assert any(line.startswith("TOTAL:") and line.endswith("Rs.213.00") for line in lines)


def test_long_names_are_truncated_to_width(config, place_order):
    order = place_order()
    long_line = replace(order.items[0], name="Extremely Long Celebration Sundae Deluxe Edition")
    lines = receipt_lines(replace(order, items=(long_line,), customer_name="Ali"), config)
    assert all(len(line) <= config.receipt_width for line in lines)


def test_render_receipt_plain_text_matches_lines(config, place_order):
    order = place_order()
    assert render_receipt(order, config).plain == "\n".join(receipt_lines(order, config))


def test_menu_is_grouped_by_category(catalog):
    plain = render_menu(catalog, "Rs.").plain
    positions = [plain.index(category) for category in ("Ice Cream", "Shakes", "Desserts", "Beverages")]
    assert positions == sorted(positions)
    assert "Rs.300.00" in plain


def test_selection_menu_is_numbered(catalog):
    lines = render_selection_menu(catalog, "Rs.").plain.splitlines()
    assert len(lines) == catalog.size()
    assert lines[0].strip().startswith("1. Chocolate Dream")
    assert lines[-1].strip().startswith("9. Karak Chai")


def test_topping_labels_show_surcharge(catalog):
    labels = topping_labels(catalog.toppings_for(catalog.item_at(1)), "Rs.")
    assert labels[0] == "Chocolate Syrup (Rs.20)"
    assert labels[-1] == "No Topping"


def test_report_shows_revenue_and_count(config, store, place_order):
    order = place_order()
    store.persist(order)
    plain = render_report(store, config, order.created_at).plain
    assert "Total Daily Revenue: Rs.226.00" in plain
    assert "Total Orders stored in RAM: 1" in plain
    assert "#1001" in plain


def test_empty_feedback_placeholder():
    assert render_feedback([]).plain == "(no feedback yet)"
    assert render_feedback(["a", "b"]).plain == "a\nb"


def test_money_values_are_decimal(place_order):
    assert isinstance(place_order().total, Decimal)
