"""tillscan: rebuild structured retail receipts from OCR text lines."""

__version__ = "1.0.0"
