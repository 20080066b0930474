"""Data models for parsed retail receipts."""

from dataclasses import dataclass, field
from decimal import Decimal

# Placeholders used when the parser cannot resolve a field
DEFAULT_COMPANY_NAME = "Unknown Store"
DEFAULT_BRANCH = "Main Branch"
DEFAULT_MANAGER_NAME = "N/A"
DEFAULT_CASHIER_NUMBER = "N/A"
DEFAULT_AMOUNT = Decimal("0.00")


@dataclass
class ReceiptItem:
    """A single purchased line item."""

    product_name: str
    quantity: int
    price: Decimal


@dataclass
class Receipt:
    """Parsed receipt data.

    Every field is populated once parsing completes; ``id`` stays ``None``
    until the receipt is persisted.
    """

    company_name: str = DEFAULT_COMPANY_NAME
    branch: str = DEFAULT_BRANCH
    manager_name: str = DEFAULT_MANAGER_NAME
    cashier_number: str = DEFAULT_CASHIER_NUMBER
    items: list[ReceiptItem] = field(default_factory=list)
    sub_total: Decimal = DEFAULT_AMOUNT
    cash: Decimal = DEFAULT_AMOUNT
    change_amount: Decimal = DEFAULT_AMOUNT
    id: int | None = None
