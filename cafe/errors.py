"""Error kinds raised by the order pipeline."""

from __future__ import annotations


class CafeError(Exception):
    """Base class for every error the till reports to the operator."""


class InvalidInput(CafeError, ValueError):
    """Text was entered where a number (or y/n) was required."""


class InvalidSelection(CafeError, ValueError):
    """An index fell outside the menu, variant, topping or payment range."""


class InvalidQuantity(InvalidSelection):
    """Quantity was not a positive whole number."""


class NotFound(CafeError, LookupError):
    """A catalog entry or log file does not exist."""


class PersistenceFailure(CafeError, RuntimeError):
    """A durable write did not succeed."""


class OrderStateError(CafeError, RuntimeError):
    """An operation was attempted in the wrong order lifecycle state."""
