"""Composable OCR receipt line parser components."""

from .common import ITEM_LOOKAHEAD_LINES, LABEL_LOOKAHEAD_LINES, _normalize_lines
from .header_parser import HeaderFields, _extract_header_fields
from .items_parser import _extract_items, _find_items_section
from .totals_parser import FinancialTotals, _extract_financial_totals

__all__ = [
    "FinancialTotals",
    "HeaderFields",
    "ITEM_LOOKAHEAD_LINES",
    "LABEL_LOOKAHEAD_LINES",
    "_extract_financial_totals",
    "_extract_header_fields",
    "_extract_items",
    "_find_items_section",
    "_normalize_lines",
]
