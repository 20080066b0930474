"""Centralized runtime settings for tillscan.

Settings are read from environment variables once and cached, mirroring
how paths are resolved: a single source of truth regardless of the current
working directory of the caller.

Environment variables:
    TILLSCAN_DATA_DIR: Receipt store directory. Default: ./tillscan-data/receipts
    TILLSCAN_AWS_REGION: AWS region for Textract/Rekognition (falls back to AWS_REGION)
    TILLSCAN_MAX_UPLOAD_BYTES: Upload size limit. Default: 10 MiB
    TILLSCAN_MIN_LABEL_CONFIDENCE: Default label confidence threshold. Default: 80.0
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_AWS_REGION = "us-east-1"
DEFAULT_MAX_UPLOAD_BYTES = 10 * 1024 * 1024
DEFAULT_MIN_LABEL_CONFIDENCE = 80.0
DEFAULT_SERVER_HOST = "127.0.0.1"
DEFAULT_SERVER_PORT = 8080


def _default_data_dir() -> Path:
    raw = os.environ.get("TILLSCAN_DATA_DIR", "").strip()
    if raw:
        return Path(raw).expanduser()
    return Path.cwd() / "tillscan-data" / "receipts"


def _default_region() -> str:
    return (
        os.environ.get("TILLSCAN_AWS_REGION", "").strip()
        or os.environ.get("AWS_REGION", "").strip()
        or DEFAULT_AWS_REGION
    )


def _int_from_env(name: str, default: int) -> int:
    try:
        return int(os.environ.get(name, "").strip() or default)
    except ValueError:
        return default


def _float_from_env(name: str, default: float) -> float:
    try:
        return float(os.environ.get(name, "").strip() or default)
    except ValueError:
        return default


@dataclass
class Settings:
    """Container for all runtime settings."""

    data_dir: Path = field(default_factory=_default_data_dir)
    aws_region: str = field(default_factory=_default_region)
    max_upload_bytes: int = field(
        default_factory=lambda: _int_from_env("TILLSCAN_MAX_UPLOAD_BYTES", DEFAULT_MAX_UPLOAD_BYTES)
    )
    min_label_confidence: float = field(
        default_factory=lambda: _float_from_env("TILLSCAN_MIN_LABEL_CONFIDENCE", DEFAULT_MIN_LABEL_CONFIDENCE)
    )

    def __post_init__(self) -> None:
        self.data_dir = Path(self.data_dir).resolve()

    def ensure_data_dir(self) -> None:
        """Create the receipt store directory if it doesn't exist."""
        self.data_dir.mkdir(parents=True, exist_ok=True)


_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the singleton Settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Forget cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
