"""Editable static menu and topping configuration."""

from __future__ import annotations

# Canonical menu rows consumed by cafe.data (which wraps these into MenuItem dataclass instances).
# Prices are strings so they convert to Decimal without float noise.
MENU_ROWS: list[dict[str, str | list[str]]] = [
    {
        "category": "Ice Cream",
        "name": "Chocolate Dream",
        "description": "Rich chocolate ice cream",
        "price": "100",
        "options": ["Single Scoop", "Double Scoop", "Triple Scoop"],
    },
    {
        "category": "Ice Cream",
        "name": "Vanilla Bliss",
        "description": "Classic vanilla ice cream",
        "price": "100",
        "options": ["Single Scoop", "Double Scoop", "Triple Scoop"],
    },
    {
        "category": "Ice Cream",
        "name": "Strawberry Fields",
        "description": "Fresh strawberry ice cream",
        "price": "120",
        "options": ["Single Scoop", "Double Scoop", "Triple Scoop"],
    },
    {
        "category": "Ice Cream",
        "name": "Mango Tango",
        "description": "Tropical mango delight",
        "price": "120",
        "options": ["Single Scoop", "Double Scoop", "Triple Scoop"],
    },
    {
        "category": "Shakes",
        "name": "Chocolate Shake",
        "description": "Rich chocolate milkshake",
        "price": "250",
        "options": ["Small", "Medium", "Large"],
    },
    {
        "category": "Shakes",
        "name": "Strawberry Shake",
        "description": "Creamy strawberry milkshake",
        "price": "250",
        "options": ["Small", "Medium", "Large"],
    },
    {
        "category": "Desserts",
        "name": "Rukaab Brownie",
        "description": "Special brownie with nuts",
        "price": "300",
        "options": ["Plain", "With Ice Cream"],
    },
    {
        "category": "Beverages",
        "name": "Coffee",
        "description": "Hot/Cold coffee",
        "price": "150",
        "options": ["Hot", "Cold"],
    },
    {
        "category": "Beverages",
        "name": "Karak Chai",
        "description": "Special strong tea",
        "price": "100",
        "options": ["Regular", "Masala"],
    },
]

# label -> surcharge per unit. Order is the operator's 1-based choice order.
TOPPING_ROWS: dict[str, str] = {
    "Chocolate Syrup": "20",
    "Strawberry Syrup": "20",
    "Caramel": "25",
    "Oreo Crumbles": "30",
    "Almonds": "30",
    "Whipped Cream": "25",
    "No Topping": "0",
}

TOPPING_CATEGORIES: frozenset[str] = frozenset({"Ice Cream"})

MAIN_MENU_OPTIONS: dict[str, str] = {
    "1": "Place New Order",
    "2": "View Menu",
    "3": "View Orders & Reports",
    "4": "Customer Feedback",
    "5": "Exit",
}

FEEDBACK_MENU_OPTIONS: list[str] = ["Give Feedback", "View Feedback"]

CATEGORY_BADGE_STYLES: dict[str, str] = {
    "Ice Cream": "bold #ffffff on #b23a48",
    "Shakes": "bold #ffffff on #2f6db5",
    "Desserts": "bold #0b1f0f on #e0b050",
    "Beverages": "bold #0b1f0f on #5fbf72",
}
