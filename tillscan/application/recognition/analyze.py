"""Label detection and celebrity recognition orchestration."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tillscan.application.receipts.scan import check_upload_size
from tillscan.runtime import get_logger

if TYPE_CHECKING:
    from tillscan.domain.recognition import ImageAnalysis
    from tillscan.runtime.rekognition_gateway import RekognitionGateway

logger = get_logger(__name__)


def run_label_detection(
    image_bytes: bytes,
    gateway: RekognitionGateway,
    min_confidence: float | None = None,
    max_upload_bytes: int | None = None,
) -> ImageAnalysis:
    """Detect labels in an uploaded image after the upload size check."""
    check_upload_size(image_bytes, max_upload_bytes)
    logger.info("Detecting labels in image (%d bytes)", len(image_bytes))
    return gateway.detect_labels(image_bytes, min_confidence=min_confidence)


def run_celebrity_recognition(
    image_bytes: bytes,
    gateway: RekognitionGateway,
    max_upload_bytes: int | None = None,
) -> ImageAnalysis:
    """Recognize celebrities in an uploaded image after the upload size check."""
    check_upload_size(image_bytes, max_upload_bytes)
    logger.info("Recognizing celebrities in image (%d bytes)", len(image_bytes))
    return gateway.recognize_celebrities(image_bytes)
