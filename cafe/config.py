"""Runtime configuration defaults for pricing, persistence and printing."""

from __future__ import annotations

import os
from dataclasses import dataclass
from decimal import Decimal
from pathlib import Path

SHOP_NAME = "Rukaab Cafe & Ice Cream"
SHOP_ADDRESS = "123 Food Street, Karachi"
SHOP_PHONE = "021-12345678"

CURRENCY_SYMBOL = "Rs."
TAX_RATE = Decimal("0.13")
DONATION_AMOUNT = Decimal("100")
DONATION_CAUSE = "Palestine Relief"
ORDER_ID_BASE = 1001

DATA_DIR = "data"
ORDER_LOG_FILENAME = "orders.txt"
FEEDBACK_LOG_FILENAME = "feedback.txt"
LOG_DIRNAME = "logs"

PRINTER_USB_VENDOR_ID = 0x28E9
PRINTER_USB_PRODUCT_ID = 0x0289
PRINTER_WIDTH_PX = 384
PRINTER_FONT_SIZE = 24
PRINTER_FONT_PATH = "/System/Library/Fonts/SFNS.ttf"
PRINTER_LEFT_INDENT_PX = 8
RECEIPT_WIDTH_CHARS = 40

_DATA_DIR_ENV = "CAFE_DATA_DIR"
_PRINTER_ENABLED_ENV = "CAFE_PRINTER_ENABLED"
_CHARGE_TOPPINGS_ENV = "CAFE_CHARGE_TOPPINGS"
_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return default
    return raw in _TRUTHY


@dataclass(frozen=True)
class CafeConfig:
    """Settings built once at startup and passed to every component."""

    data_dir: Path = Path(DATA_DIR)
    shop_name: str = SHOP_NAME
    shop_address: str = SHOP_ADDRESS
    shop_phone: str = SHOP_PHONE
    currency: str = CURRENCY_SYMBOL
    tax_rate: Decimal = TAX_RATE
    donation_amount: Decimal = DONATION_AMOUNT
    donation_cause: str = DONATION_CAUSE
    order_id_base: int = ORDER_ID_BASE
    # Topping labels carry prices but are informational unless this is set.
    charge_toppings: bool = False
    printer_enabled: bool = False
    printer_usb_vendor_id: int = PRINTER_USB_VENDOR_ID
    printer_usb_product_id: int = PRINTER_USB_PRODUCT_ID
    printer_font_path: str = PRINTER_FONT_PATH
    receipt_width: int = RECEIPT_WIDTH_CHARS

    @property
    def order_log_path(self) -> Path:
        return self.data_dir / ORDER_LOG_FILENAME

    @property
    def feedback_log_path(self) -> Path:
        return self.data_dir / FEEDBACK_LOG_FILENAME

    @property
    def log_dir(self) -> Path:
        return self.data_dir / LOG_DIRNAME

    @property
    def tax_percent_label(self) -> str:
        return f"{(self.tax_rate * 100).normalize():f}%"

    @classmethod
    def from_env(cls) -> CafeConfig:
        """Build the config, letting environment variables override file locations and switches."""
        data_dir = os.environ.get(_DATA_DIR_ENV, "").strip() or DATA_DIR
        return cls(
            data_dir=Path(data_dir),
            charge_toppings=_env_flag(_CHARGE_TOPPINGS_ENV),
            printer_enabled=_env_flag(_PRINTER_ENABLED_ENV),
        )
