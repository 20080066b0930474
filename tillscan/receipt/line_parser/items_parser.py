"""Item-section detection and name/quantity/price tuple parsing."""

from decimal import Decimal

from tillscan.domain.receipt import ReceiptItem

from .common import (
    ITEM_LOOKAHEAD_LINES,
    _is_items_terminator,
    _is_numeric_only,
    _is_price_only,
    _is_section_header,
    _is_separator,
    _is_subtotal_label,
    _parse_price,
    _parse_quantity,
    _window,
)


def _find_items_section(lines: list[str]) -> tuple[int, int] | None:
    """
    Locate the item list as a half-open ``(start, end)`` index range.

    The list starts after the first column header row ("Name", "Qty", ...)
    and ends at the first terminator line anywhere in the sequence, or at
    the end of the sequence when there is none.

    Returns:
        The range, or None if there is no header row or the range is empty
    """
    start = next((i + 1 for i, line in enumerate(lines) if _is_section_header(line)), None)
    if start is None:
        return None

    end = next((i for i, line in enumerate(lines) if _is_items_terminator(line)), len(lines))
    if end <= start:
        return None
    return start, end


def _is_item_noise(line: str) -> bool:
    """Return True for lines that can never be a product name."""
    return (
        not line
        or _is_section_header(line)
        or _is_subtotal_label(line)
        or _is_separator(line)
        or _is_numeric_only(line)
        or _is_price_only(line)
    )


def _match_item(lines: list[str], name_index: int, end: int) -> tuple[ReceiptItem, int] | None:
    """
    Resolve quantity and price for the candidate name at ``name_index``.

    Looks at up to ITEM_LOOKAHEAD_LINES following lines, in any order.

    Returns:
        (item, index of the last line consumed), or None if either value is missing
    """
    quantity: int | None = None
    price: Decimal | None = None

    for i in _window(lines, name_index, ITEM_LOOKAHEAD_LINES, end):
        line = lines[i]
        line_quantity = _parse_quantity(line) if quantity is None else None
        if line_quantity is not None:
            quantity = line_quantity
        elif price is None:
            price = _parse_price(line)

        if quantity is not None and price is not None:
            return ReceiptItem(product_name=lines[name_index], quantity=quantity, price=price), i

    return None


def _next_product_start(lines: list[str], start: int, end: int) -> int:
    """Skip leftover quantity/price lines after an emitted item."""
    for i in range(start, end):
        if not _is_numeric_only(lines[i]) and not _is_price_only(lines[i]):
            return i
    return end


def _extract_items(lines: list[str]) -> list[ReceiptItem]:
    """
    Extract line items from the item section.

    A candidate product line is discarded when its window lacks either a
    quantity or a price; the scan then moves on by one line.

    Args:
        lines: Trimmed OCR lines in reading order

    Returns:
        Items in the order they appear on the receipt
    """
    section = _find_items_section(lines)
    if section is None:
        return []
    start, end = section

    items: list[ReceiptItem] = []
    i = start
    while i < end:
        if _is_item_noise(lines[i]):
            i += 1
            continue

        matched = _match_item(lines, i, end)
        if matched is None:
            i += 1
            continue

        item, last_consumed = matched
        items.append(item)
        i = _next_product_start(lines, last_consumed + 1, end)

    return items
