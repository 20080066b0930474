from decimal import Decimal

from tillscan.domain.receipt import ReceiptItem
from tillscan.receipt.line_parser import ITEM_LOOKAHEAD_LINES, _extract_items, _find_items_section


def test_item_lookahead_is_four_lines() -> None:
    assert ITEM_LOOKAHEAD_LINES == 4


def test_find_items_section_without_header_row() -> None:
    assert _find_items_section(["Widget", "2", "$5.00", "Total", "$10.00"]) is None


def test_find_items_section_without_terminator_runs_to_end() -> None:
    lines = ["Name", "A Item", "1", "$1.00", "B Item", "2", "$2.00"]

    assert _find_items_section(lines) == (1, 7)
    assert _extract_items(lines) == [
        ReceiptItem(product_name="A Item", quantity=1, price=Decimal("1.00")),
        ReceiptItem(product_name="B Item", quantity=2, price=Decimal("2.00")),
    ]


def test_find_items_section_total_is_substring_and_cash_is_exact() -> None:
    assert _find_items_section(["Name", "Soap", "1", "$2.00", "Grand TOTAL", "$2.00"]) == (1, 4)
    assert _find_items_section(["Name", "Soap", "Cashback", "Cash"]) == (1, 3)


def test_terminator_before_header_row_yields_no_items() -> None:
    lines = ["Total", "$1.00", "Name", "Widget", "1", "$1.00"]

    assert _find_items_section(lines) is None
    assert _extract_items(lines) == []


def test_extract_items_name_quantity_price() -> None:
    lines = ["Name", "Widget", "2", "$5.00", "Subtotal", "$10.00"]

    assert _extract_items(lines) == [ReceiptItem(product_name="Widget", quantity=2, price=Decimal("5.00"))]


def test_extract_items_accepts_price_before_quantity() -> None:
    lines = ["Qty", "Milk", "$2.49", "1"]

    assert _extract_items(lines) == [ReceiptItem(product_name="Milk", quantity=1, price=Decimal("2.49"))]


def test_extract_items_price_without_quantity_is_discarded() -> None:
    lines = ["Name", "Widget", "$5.00", "Subtotal", "$5.00"]

    assert _extract_items(lines) == []


def test_extract_items_quantity_on_last_window_line_is_used() -> None:
    lines = ["Name", "Widget", "$5.00", "-----", "=====", "2"]

    assert _extract_items(lines) == [ReceiptItem(product_name="Widget", quantity=2, price=Decimal("5.00"))]


def test_extract_items_quantity_past_window_is_ignored() -> None:
    lines = ["Name", "Widget", "$5.00", "-----", "=====", "*****", "2"]

    assert _extract_items(lines) == []


def test_extract_items_four_digit_number_is_not_a_quantity() -> None:
    lines = ["Name", "Widget", "1234", "$5.00"]

    assert _extract_items(lines) == []


def test_extract_items_separators_neither_emit_nor_terminate() -> None:
    lines = ["Name", "-----", "Tea", "1", "$4.00", "=====", "Coffee", "2", "$6.00", "Total", "$10.00"]

    items = _extract_items(lines)

    assert [item.product_name for item in items] == ["Tea", "Coffee"]
    assert [item.price for item in items] == [Decimal("4.00"), Decimal("6.00")]


def test_extract_items_skips_repeated_column_headers() -> None:
    lines = ["Name", "Qty", "Price", "Apple", "3", "$0.99"]

    assert _extract_items(lines) == [ReceiptItem(product_name="Apple", quantity=3, price=Decimal("0.99"))]


def test_extract_items_skips_trailing_amount_remnants() -> None:
    lines = ["Name", "Pens", "2", "$1.00", "$2.00", "4", "Ink", "1", "$7.50"]

    items = _extract_items(lines)

    assert [(item.product_name, item.quantity, item.price) for item in items] == [
        ("Pens", 2, Decimal("1.00")),
        ("Ink", 1, Decimal("7.50")),
    ]


def test_extract_items_price_found_inside_text_line() -> None:
    lines = ["Name", "Widget", "2", "5.00 EA"]

    assert _extract_items(lines) == [ReceiptItem(product_name="Widget", quantity=2, price=Decimal("5.00"))]
