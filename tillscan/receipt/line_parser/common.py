"""Shared patterns and line classifiers for OCR receipt line parsing."""

import re
from collections.abc import Sequence
from decimal import Decimal, InvalidOperation

# Lookahead windows, in lines after the label/candidate line
LABEL_LOOKAHEAD_LINES = 2
ITEM_LOOKAHEAD_LINES = 4

# "$5.00", "$ 5.00", "5.00"; searched anywhere in a line
PRICE_PATTERN = re.compile(r"\$?\s*(\d+\.\d{2})")
QUANTITY_PATTERN = re.compile(r"^(\d{1,3})$")
NUMERIC_ONLY_PATTERN = re.compile(r"^\d+$")
CASHIER_NUMBER_PATTERN = re.compile(r"^#?\d+$")
SEPARATOR_PATTERN = re.compile(r"^[-=*_]{3,}$")

# Column header row that opens the item list
SECTION_HEADER_PATTERN = re.compile(r"^(name|qty|quantity|price)$", re.IGNORECASE)

# Financial labels
SUBTOTAL_PATTERN = re.compile(r"^(sub\s*total|subtotal)$", re.IGNORECASE)
CASH_PATTERN = re.compile(r"^cash$", re.IGNORECASE)
CHANGE_PATTERN = re.compile(r"^change$", re.IGNORECASE)

# Header labels; the remainder after the label and optional colon is the inline value
CASHIER_LABEL_PATTERN = re.compile(r"^cashier(?:\s*:|\s+|$)\s*(?P<value>.*)$", re.IGNORECASE)
MANAGER_LABEL_PATTERN = re.compile(r"^manager(?:\s*:|\s+|$)\s*(?P<value>.*)$", re.IGNORECASE)

BRANCH_KEYWORDS = ("branch", "store", "location", "outlet")
ADDRESS_KEYWORDS = ("city", "address")


def _normalize_lines(lines: Sequence[str] | None) -> list[str]:
    """Return trimmed string lines; non-string entries become empty lines."""
    if not lines:
        return []
    return [line.strip() if isinstance(line, str) else "" for line in lines]


def _is_numeric_only(line: str) -> bool:
    return NUMERIC_ONLY_PATTERN.match(line) is not None


def _is_price_only(line: str) -> bool:
    return PRICE_PATTERN.fullmatch(line) is not None


def _is_separator(line: str) -> bool:
    """Return True for rule lines such as "-----" or "====="."""
    return SEPARATOR_PATTERN.match(line) is not None


def _is_section_header(line: str) -> bool:
    return SECTION_HEADER_PATTERN.match(line) is not None


def _is_subtotal_label(line: str) -> bool:
    return SUBTOTAL_PATTERN.match(line) is not None


def _is_items_terminator(line: str) -> bool:
    """Return True if the line closes the item list.

    "total" is matched as a substring while the subtotal and cash labels must
    match the whole line.
    """
    return _is_subtotal_label(line) or "total" in line.lower() or CASH_PATTERN.match(line) is not None


def _parse_price(line: str) -> Decimal | None:
    """Return the first currency-like amount in the line, if any."""
    match = PRICE_PATTERN.search(line)
    if not match:
        return None
    try:
        return Decimal(match.group(1))
    except InvalidOperation:
        return None


def _parse_quantity(line: str) -> int | None:
    """Return the quantity if the whole line is a 1-3 digit count."""
    match = QUANTITY_PATTERN.match(line)
    if not match:
        return None
    return int(match.group(1))


def _window(lines: list[str], index: int, size: int, end: int | None = None) -> range:
    """Indexes of the ``size`` lines following ``index``, capped at ``end``."""
    limit = len(lines) if end is None else min(end, len(lines))
    return range(index + 1, min(index + 1 + size, limit))
