import logging
from decimal import Decimal
from pathlib import Path

from cafe.config import CafeConfig
from cafe.logger import LOGGER_NAME, setup_logger


def test_defaults(monkeypatch):
    for name in ("CAFE_DATA_DIR", "CAFE_PRINTER_ENABLED", "CAFE_CHARGE_TOPPINGS"):
        monkeypatch.delenv(name, raising=False)
    config = CafeConfig.from_env()
    assert config.data_dir == Path("data")
    assert config.tax_rate == Decimal("0.13")
    assert config.donation_amount == Decimal("100")
    assert config.order_id_base == 1001
    assert config.tax_percent_label == "13%"
    assert not config.printer_enabled
    assert not config.charge_toppings


def test_env_overrides(tmp_path, monkeypatch):
    monkeypatch.setenv("CAFE_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("CAFE_PRINTER_ENABLED", "yes")
    monkeypatch.setenv("CAFE_CHARGE_TOPPINGS", "0")
    config = CafeConfig.from_env()
    assert config.order_log_path == tmp_path / "orders.txt"
    assert config.feedback_log_path == tmp_path / "feedback.txt"
    assert config.printer_enabled
    assert not config.charge_toppings


def test_setup_logger_writes_to_data_dir(tmp_path):
    logger = logging.getLogger(LOGGER_NAME)
    saved_handlers = list(logger.handlers)
    logger.handlers.clear()
    try:
        config = CafeConfig(data_dir=tmp_path)
        assert setup_logger(config) is logger
        assert setup_logger(config) is logger
        assert len(logger.handlers) == 1
        logging.getLogger("cafe.persistence").info("hello")
        for handler in logger.handlers:
            handler.flush()
        assert "cafe.persistence: hello" in (tmp_path / "logs" / "cafe.log").read_text(encoding="utf-8")
    finally:
        for handler in logger.handlers:
            handler.close()
        logger.handlers[:] = saved_handlers
