"""Format Receipt and recognition data for API responses and terminal output."""

from decimal import Decimal
from typing import Any

from tillscan.domain.receipt import Receipt, ReceiptItem
from tillscan.domain.recognition import ImageAnalysis


def _amount(value: Decimal) -> float:
    return float(value)


def item_to_dict(item: ReceiptItem) -> dict[str, Any]:
    return {
        "productName": item.product_name,
        "quantity": item.quantity,
        "price": _amount(item.price),
    }


def receipt_to_dict(receipt: Receipt) -> dict[str, Any]:
    """
    Shape a receipt as the JSON object returned by the HTTP API.

    Keys use camelCase to stay compatible with existing API clients.
    """
    return {
        "id": receipt.id,
        "companyName": receipt.company_name,
        "branch": receipt.branch,
        "managerName": receipt.manager_name,
        "cashierNumber": receipt.cashier_number,
        "items": [item_to_dict(item) for item in receipt.items],
        "subTotal": _amount(receipt.sub_total),
        "cash": _amount(receipt.cash),
        "changeAmount": _amount(receipt.change_amount),
    }


def image_analysis_to_dict(analysis: ImageAnalysis) -> dict[str, Any]:
    return {
        "labels": [{"name": label.name, "confidence": label.confidence} for label in analysis.labels],
        "celebrities": [
            {"name": celebrity.name, "matchConfidence": celebrity.match_confidence, "urls": list(celebrity.urls)}
            for celebrity in analysis.celebrities
        ],
        "totalDetections": analysis.total_detections,
    }


def _format_items_aligned(items: list[ReceiptItem], indent: str = "  ") -> list[str]:
    """
    Format item rows with aligned names, quantities and prices.

    Args:
        items: Items in receipt order
        indent: Indentation prefix for each line

    Returns:
        List of formatted item lines
    """
    if not items:
        return []

    rows = [(f"{i}. {item.product_name}", f"x{item.quantity}", f"${item.price:.2f}") for i, item in enumerate(items, 1)]
    max_name_len = max(len(name) for name, _, _ in rows)
    max_qty_len = max(len(qty) for _, qty, _ in rows)
    max_price_len = max(len(price) for _, _, price in rows)

    return [
        f"{indent}{name.ljust(max_name_len)}  {qty.rjust(max_qty_len)}  {price.rjust(max_price_len)}"
        for name, qty, price in rows
    ]


def format_receipt_summary(receipt: Receipt) -> str:
    """Render a receipt as a human-readable block for the CLI."""
    lines = ["=" * 60]
    if receipt.id is not None:
        lines.append(f"RECEIPT #{receipt.id}")
    else:
        lines.append("PARSED RECEIPT")
    lines.append("=" * 60)
    lines.append(f"Company: {receipt.company_name}")
    lines.append(f"Branch: {receipt.branch}")
    lines.append(f"Manager: {receipt.manager_name}")
    lines.append(f"Cashier: {receipt.cashier_number}")
    lines.append(f"\nItems ({len(receipt.items)}):")
    lines.extend(_format_items_aligned(receipt.items))
    lines.append("")
    lines.append(f"Subtotal: ${receipt.sub_total:.2f}")
    lines.append(f"Cash: ${receipt.cash:.2f}")
    lines.append(f"Change: ${receipt.change_amount:.2f}")
    lines.append("=" * 60)
    return "\n".join(lines)
