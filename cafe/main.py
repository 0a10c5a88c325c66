"""Entry point for the cafe till Textual app."""

from __future__ import annotations

from cafe.cafe_app import CafeApp
from cafe.config import CafeConfig
from cafe.logger import setup_logger


def main() -> None:
    config = CafeConfig.from_env()
    setup_logger(config)
    CafeApp(config).run()


if __name__ == "__main__":
    main()
