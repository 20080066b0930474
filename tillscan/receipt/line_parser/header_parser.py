"""Store, branch, cashier and manager extraction from the receipt header."""

import re
from dataclasses import dataclass

from .common import (
    ADDRESS_KEYWORDS,
    BRANCH_KEYWORDS,
    CASHIER_LABEL_PATTERN,
    CASHIER_NUMBER_PATTERN,
    LABEL_LOOKAHEAD_LINES,
    MANAGER_LABEL_PATTERN,
    _is_numeric_only,
    _is_price_only,
    _window,
)


@dataclass
class HeaderFields:
    """Header values found by the scan; ``None`` means not detected."""

    company_name: str | None = None
    branch: str | None = None
    cashier_number: str | None = None
    manager_name: str | None = None


def _is_likely_company_name(line: str, index: int) -> bool:
    """
    Return True if the line can serve as the store name.

    The first line always qualifies when it has text. Later lines must be
    longer than 3 characters, carry no bare number or price, and avoid
    address vocabulary.
    """
    if not line:
        return False
    if index == 0:
        return True
    lower = line.lower()
    return (
        len(line) > 3
        and not _is_price_only(line)
        and not _is_numeric_only(line)
        and not any(keyword in lower for keyword in ADDRESS_KEYWORDS)
    )


def _is_likely_branch(line: str) -> bool:
    lower = line.lower()
    if "city" in lower and "index" not in lower:
        return True
    return any(keyword in lower for keyword in BRANCH_KEYWORDS)


def _inline_label_value(pattern: re.Pattern[str], line: str) -> str | None:
    """Return the text after a label on the same line, or None if blank."""
    match = pattern.match(line)
    if not match:
        return None
    value = match.group("value").strip()
    return value or None


def _next_cashier_number(lines: list[str], label_index: int) -> str | None:
    """Find a "#123" or "123" token in the lines after a cashier label."""
    for i in _window(lines, label_index, LABEL_LOOKAHEAD_LINES):
        if CASHIER_NUMBER_PATTERN.match(lines[i]):
            return lines[i]
    return None


def _next_manager_name(lines: list[str], label_index: int) -> str | None:
    """Find the first textual line after a manager label."""
    for i in _window(lines, label_index, LABEL_LOOKAHEAD_LINES):
        line = lines[i]
        if line and not _is_numeric_only(line) and not _is_price_only(line):
            return line
    return None


def _extract_header_fields(lines: list[str]) -> HeaderFields:
    """
    Scan all lines once for header fields.

    Each field keeps the first value found; later candidates are ignored.

    Args:
        lines: Trimmed OCR lines in reading order

    Returns:
        HeaderFields with unresolved fields left as None
    """
    header = HeaderFields()

    for index, line in enumerate(lines):
        if header.company_name is None and _is_likely_company_name(line, index):
            header.company_name = line

        if header.branch is None and line and _is_likely_branch(line):
            header.branch = line

        if header.cashier_number is None and CASHIER_LABEL_PATTERN.match(line):
            header.cashier_number = _inline_label_value(CASHIER_LABEL_PATTERN, line) or _next_cashier_number(
                lines, index
            )

        if header.manager_name is None and MANAGER_LABEL_PATTERN.match(line):
            header.manager_name = _inline_label_value(MANAGER_LABEL_PATTERN, line) or _next_manager_name(
                lines, index
            )

    return header
