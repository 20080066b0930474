"""Storage and retrieval of parsed receipts.

Each receipt is stored as one JSON file named after its id:

    <data_dir>/
    ├── receipt_000001.json
    ├── receipt_000002.json
    └── ...

Ids are positive integers assigned in save order. Monetary values are stored
as strings so that two-decimal amounts survive the round trip exactly.
"""

from __future__ import annotations

import json
import re
from dataclasses import replace
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any

from tillscan.domain.receipt import (
    DEFAULT_AMOUNT,
    DEFAULT_BRANCH,
    DEFAULT_CASHIER_NUMBER,
    DEFAULT_COMPANY_NAME,
    DEFAULT_MANAGER_NAME,
    Receipt,
    ReceiptItem,
)
from tillscan.runtime.config import get_settings
from tillscan.runtime.errors import ReceiptNotFound
from tillscan.runtime.logging import get_logger

logger = get_logger(__name__)

_FILENAME_PATTERN = re.compile(r"^receipt_(\d+)\.json$")


def receipt_filename(receipt_id: int) -> str:
    return f"receipt_{receipt_id:06d}.json"


def _decimal(value: Any, default: Decimal = DEFAULT_AMOUNT) -> Decimal:
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError):
        return default


def serialize_receipt(receipt: Receipt) -> dict[str, Any]:
    return {
        "id": receipt.id,
        "company_name": receipt.company_name,
        "branch": receipt.branch,
        "manager_name": receipt.manager_name,
        "cashier_number": receipt.cashier_number,
        "items": [
            {"product_name": item.product_name, "quantity": item.quantity, "price": str(item.price)}
            for item in receipt.items
        ],
        "sub_total": str(receipt.sub_total),
        "cash": str(receipt.cash),
        "change_amount": str(receipt.change_amount),
    }


def _quantity(value: Any) -> int:
    try:
        return int(value)
    except TypeError as e:
        raise ValueError(f"Invalid item quantity: {value!r}") from e


def deserialize_receipt(data: Any) -> Receipt:
    """
    Rebuild a Receipt from its stored JSON form, defaulting missing fields.

    Raises:
        ValueError: If the stored data does not have the receipt shape
    """
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object, got {type(data).__name__}")
    raw_items = data.get("items", [])
    if not isinstance(raw_items, list) or not all(isinstance(raw, dict) for raw in raw_items):
        raise ValueError("Expected 'items' to be a list of JSON objects")

    items = [
        ReceiptItem(
            product_name=str(raw.get("product_name", "")),
            quantity=_quantity(raw.get("quantity", 0)),
            price=_decimal(raw.get("price")),
        )
        for raw in raw_items
    ]
    stored_id = data.get("id")
    return Receipt(
        id=stored_id if isinstance(stored_id, int) else None,
        company_name=data.get("company_name") or DEFAULT_COMPANY_NAME,
        branch=data.get("branch") or DEFAULT_BRANCH,
        manager_name=data.get("manager_name") or DEFAULT_MANAGER_NAME,
        cashier_number=data.get("cashier_number") or DEFAULT_CASHIER_NUMBER,
        items=items,
        sub_total=_decimal(data.get("sub_total")),
        cash=_decimal(data.get("cash")),
        change_amount=_decimal(data.get("change_amount")),
    )


class ReceiptStore:
    """File-backed receipt repository."""

    def __init__(self, directory: Path | None = None) -> None:
        self.directory = Path(directory) if directory is not None else get_settings().data_dir

    def ensure_directory(self) -> None:
        """Create the store directory if it doesn't exist."""
        self.directory.mkdir(parents=True, exist_ok=True)

    def _existing_ids(self) -> list[int]:
        if not self.directory.exists():
            return []
        ids = []
        for path in self.directory.iterdir():
            match = _FILENAME_PATTERN.match(path.name)
            if match:
                ids.append(int(match.group(1)))
        return sorted(ids)

    def _path_for(self, receipt_id: int) -> Path:
        return self.directory / receipt_filename(receipt_id)

    def save(self, receipt: Receipt) -> Receipt:
        """
        Persist a receipt under a newly assigned id.

        Args:
            receipt: Parsed receipt; its own ``id`` is ignored

        Returns:
            A copy of the receipt carrying the assigned id
        """
        self.ensure_directory()

        existing = self._existing_ids()
        receipt_id = (existing[-1] + 1) if existing else 1

        # Claim the id by creating its file exclusively; concurrent writers move on to the next id
        while True:
            filepath = self._path_for(receipt_id)
            try:
                handle = open(filepath, "x", encoding="utf-8")
            except FileExistsError:
                receipt_id += 1
                continue
            break

        saved = replace(receipt, id=receipt_id, items=list(receipt.items))
        try:
            with handle:
                json.dump(serialize_receipt(saved), handle, indent=2)
        except (OSError, TypeError, ValueError):
            filepath.unlink(missing_ok=True)
            raise
        logger.info("Receipt saved successfully with ID: %s", receipt_id)
        return saved

    def find_all(self) -> list[Receipt]:
        """Return every stored receipt ordered by id; unreadable files are skipped."""
        receipts = []
        for receipt_id in self._existing_ids():
            filepath = self._path_for(receipt_id)
            try:
                receipts.append(self._load(filepath))
            except (OSError, ValueError) as e:
                logger.warning("Failed to load %s: %s", filepath, e)
        return receipts

    def find_by_id(self, receipt_id: int) -> Receipt:
        """
        Load one receipt.

        Raises:
            ReceiptNotFound: If no receipt is stored under ``receipt_id``
        """
        filepath = self._path_for(receipt_id)
        if receipt_id < 1 or not filepath.exists():
            raise ReceiptNotFound(receipt_id)
        return self._load(filepath)

    def _load(self, filepath: Path) -> Receipt:
        data = json.loads(filepath.read_text(encoding="utf-8"))
        receipt = deserialize_receipt(data)
        if receipt.id is None:
            match = _FILENAME_PATTERN.match(filepath.name)
            if match:
                receipt.id = int(match.group(1))
        return receipt


_store: ReceiptStore | None = None


def get_receipt_store() -> ReceiptStore:
    """Get the process-wide store rooted at the configured data directory."""
    global _store
    if _store is None:
        _store = ReceiptStore()
    return _store
