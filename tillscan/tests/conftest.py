"""Shared pytest fixtures for tillscan tests."""

from __future__ import annotations

import pytest

from tillscan.runtime import receipt_storage, rekognition_gateway, textract_gateway
from tillscan.runtime.config import reset_settings

SAMPLE_RECEIPT_LINES = [
    "Fresh Mart",
    "Branch 12",
    "Manager",
    "Jane",
    "Cashier",
    "#3",
    "Name",
    "Qty",
    "Price",
    "Apple",
    "2",
    "$1.50",
    "Bread",
    "1",
    "$3.00",
    "SubTotal",
    "$6.00",
    "Cash",
    "$10.00",
    "Change",
    "$4.00",
]


@pytest.fixture(autouse=True)
def isolated_runtime(tmp_path, monkeypatch):
    """Point settings at a temporary data directory and drop cached singletons."""
    monkeypatch.setenv("TILLSCAN_DATA_DIR", str(tmp_path / "receipts"))
    monkeypatch.delenv("TILLSCAN_MAX_UPLOAD_BYTES", raising=False)
    monkeypatch.delenv("TILLSCAN_MIN_LABEL_CONFIDENCE", raising=False)
    monkeypatch.setattr(receipt_storage, "_store", None)
    monkeypatch.setattr(textract_gateway, "_gateway", None)
    monkeypatch.setattr(rekognition_gateway, "_gateway", None)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def sample_receipt_lines() -> list[str]:
    return list(SAMPLE_RECEIPT_LINES)
