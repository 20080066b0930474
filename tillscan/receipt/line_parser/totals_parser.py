"""Subtotal, cash tendered and change extraction."""

import re
from dataclasses import dataclass
from decimal import Decimal

from .common import CASH_PATTERN, CHANGE_PATTERN, LABEL_LOOKAHEAD_LINES, SUBTOTAL_PATTERN, _parse_price, _window


@dataclass
class FinancialTotals:
    """Trailing amounts found by the scan; ``None`` means not detected."""

    sub_total: Decimal | None = None
    cash: Decimal | None = None
    change_amount: Decimal | None = None


# Label pattern -> FinancialTotals attribute
_TOTAL_LABELS: tuple[tuple[re.Pattern[str], str], ...] = (
    (SUBTOTAL_PATTERN, "sub_total"),
    (CASH_PATTERN, "cash"),
    (CHANGE_PATTERN, "change_amount"),
)


def _next_amount(lines: list[str], label_index: int) -> Decimal | None:
    for i in _window(lines, label_index, LABEL_LOOKAHEAD_LINES):
        amount = _parse_price(lines[i])
        if amount is not None:
            return amount
    return None


def _extract_financial_totals(lines: list[str]) -> FinancialTotals:
    """
    Scan all lines for subtotal, cash and change labels.

    The scan is independent of the item section. A label must be the whole
    line; its amount comes from one of the next LABEL_LOOKAHEAD_LINES lines.
    The first resolved value for each field wins.
    """
    totals = FinancialTotals()

    for index, line in enumerate(lines):
        for pattern, attr in _TOTAL_LABELS:
            if getattr(totals, attr) is not None or not pattern.match(line):
                continue
            amount = _next_amount(lines, index)
            if amount is not None:
                setattr(totals, attr, amount)

    return totals
