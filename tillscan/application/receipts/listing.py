"""Receipt listing workflow orchestration."""

from __future__ import annotations

from dataclasses import dataclass

from tillscan.domain.receipt import Receipt
from tillscan.runtime.receipt_storage import ReceiptStore


@dataclass(frozen=True)
class ReceiptListing:
    """Stored receipts for CLI/API display."""

    receipts: list[Receipt]


def run_list_receipts(store: ReceiptStore) -> ReceiptListing:
    """Load every stored receipt."""
    return ReceiptListing(receipts=store.find_all())


def run_get_receipt(store: ReceiptStore, receipt_id: int) -> Receipt:
    """Load one stored receipt; ReceiptNotFound propagates to the caller."""
    return store.find_by_id(receipt_id)
