"""
Recognized expense categories and income sources offered as defaults.
The ledgers accept any label; these lists are suggestions, not a whitelist.
"""

EXPENSE_CATEGORIES = [
    "Groceries",
    "Transport",
    "Housing",
    "Entertainment",
    "Health",
    "Education",
    "Clothing",
    "Restaurants",
    "Travel",
    "Other",
]

INCOME_SOURCES = [
    "Salary",
    "Freelance",
    "Investments",
    "Gifts",
    "Rent",
    "Sales",
    "Other",
]


def is_known_category(label: str) -> bool:
    return label in EXPENSE_CATEGORIES


def is_known_source(label: str) -> bool:
    return label in INCOME_SOURCES
