"""Core domain models for tillscan.

This module provides the data models used throughout the project:
- Receipt, ReceiptItem: Parsed receipt models
- DetectedLabel, Celebrity, ImageAnalysis: Image recognition models

Usage:
    from tillscan.domain import Receipt, ReceiptItem
"""

from tillscan.domain.receipt import Receipt, ReceiptItem
from tillscan.domain.recognition import Celebrity, DetectedLabel, ImageAnalysis

__all__ = [
    "Receipt",
    "ReceiptItem",
    "DetectedLabel",
    "Celebrity",
    "ImageAnalysis",
]
