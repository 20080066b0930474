"""AWS Textract gateway: document bytes in, OCR text lines out."""

from __future__ import annotations

import time
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from tillscan.receipt.ocr_helpers import lines_from_textract_response
from tillscan.runtime.config import get_settings
from tillscan.runtime.errors import TextractError
from tillscan.runtime.logging import get_logger

logger = get_logger(__name__)


class TextractGateway:
    """Thin wrapper over a boto3 Textract client.

    The client is created on first use so that importing this module never
    touches AWS credentials.
    """

    def __init__(self, client: Any | None = None, region: str | None = None) -> None:
        self._client = client
        self._region = region

    @property
    def client(self) -> Any:
        if self._client is None:
            region = self._region or get_settings().aws_region
            try:
                self._client = boto3.client("textract", region_name=region)
            except BotoCoreError as e:
                raise TextractError(f"Failed to initialize AWS Textract client: {e}") from e
            logger.info("AWS Textract client initialized (region: %s)", region)
        return self._client

    def extract_lines(self, document_bytes: bytes) -> list[str]:
        """
        Detect text in a document and return one string per LINE block.

        Raises:
            TextractError: If the document is empty or Textract fails
        """
        if not document_bytes:
            raise TextractError("Textract Failed: document is empty")

        logger.info("Calling Textract detect_document_text (%d bytes)...", len(document_bytes))
        start_time = time.time()
        try:
            response = self.client.detect_document_text(Document={"Bytes": document_bytes})
        except (BotoCoreError, ClientError) as e:
            logger.error("Textract call failed: %s", e)
            raise TextractError(f"Textract Failed: {e}") from e
        logger.info("Textract returned in %.2f seconds", time.time() - start_time)

        lines = lines_from_textract_response(response)
        logger.info("Extracted %d lines", len(lines))
        for i, line in enumerate(lines):
            logger.debug("Line %d: '%s'", i, line)
        return lines


_gateway: TextractGateway | None = None


def get_textract_gateway() -> TextractGateway:
    """Get the process-wide Textract gateway."""
    global _gateway
    if _gateway is None:
        _gateway = TextractGateway()
    return _gateway
