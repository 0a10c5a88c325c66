from datetime import datetime

import pytest

from cafe.builder import OrderBuilder
from cafe.config import CafeConfig
from cafe.data import load_catalog
from cafe.persistence import OrderStore
from cafe.pricing import PricingEngine

FIXED_NOW = datetime(2026, 10, 19, 12, 30, 0)


@pytest.fixture
def config(tmp_path):
    return CafeConfig(data_dir=tmp_path / "data")


@pytest.fixture
def catalog():
    return load_catalog()


@pytest.fixture
def store(config):
    return OrderStore(config.order_log_path, config.order_id_base, config.currency)


@pytest.fixture
def builder(catalog, store):
    return OrderBuilder(catalog, store.next_order_id, clock=lambda: FIXED_NOW)


@pytest.fixture
def pricing(config):
    return PricingEngine(config)


@pytest.fixture
def place_order(builder, pricing):
    """Build and finalize an order of Chocolate Dream (menu #1, Single Scoop, No Topping)."""

    def _place(quantity=2, donate=False, payment=1, customer="Ali"):
        draft = builder.start_order(customer)
        builder.add_line_item(1, quantity)
        builder.choose_variant(1)
        builder.choose_topping(7)
        builder.finish_items()
        totals = pricing.compute_totals(draft, donate)
        return pricing.set_payment_method(draft, totals, payment)

    return _place
