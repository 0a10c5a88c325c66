"""Operator input parsing shared by the console prompts."""

from __future__ import annotations

import re

from cafe.errors import InvalidInput, InvalidQuantity, InvalidSelection

_YES = {"y", "yes"}
_NO = {"n", "no"}
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_int(raw: str) -> int:
    """Parse a whole number typed by the operator."""
    text = raw.strip()
    if not _INT_PATTERN.fullmatch(text):
        raise InvalidInput("Invalid input. Please enter a number.")
    return int(text)


def parse_index(raw: str, count: int) -> int:
    """Parse a 1-based choice and check it against ``count`` options."""
    value = parse_int(raw)
    if not (1 <= value <= count):
        raise InvalidSelection(f"Invalid selection! Choose 1-{count}.")
    return value


def parse_yes_no(raw: str) -> bool:
    answer = raw.strip().lower()
    if answer in _YES:
        return True
    if answer in _NO:
        return False
    raise InvalidInput("Please answer y or n.")


def parse_quantity(raw: str) -> int:
    value = parse_int(raw)
    if value < 1:
        raise InvalidQuantity("Quantity must be at least 1.")
    return value
