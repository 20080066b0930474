"""AWS Rekognition gateway for label detection and celebrity recognition.

This pipeline is unrelated to receipt parsing; it shares the upload and
error-handling surface of the service.
"""

from __future__ import annotations

from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from tillscan.domain.recognition import Celebrity, DetectedLabel, ImageAnalysis
from tillscan.runtime.config import get_settings
from tillscan.runtime.errors import RekognitionError
from tillscan.runtime.logging import get_logger

logger = get_logger(__name__)

MAX_LABELS = 50


class RekognitionGateway:
    """Thin wrapper over a lazily created boto3 Rekognition client."""

    def __init__(self, client: Any | None = None, region: str | None = None) -> None:
        self._client = client
        self._region = region

    @property
    def client(self) -> Any:
        if self._client is None:
            region = self._region or get_settings().aws_region
            try:
                self._client = boto3.client("rekognition", region_name=region)
            except BotoCoreError as e:
                raise RekognitionError(f"Failed to initialize AWS Rekognition client: {e}") from e
            logger.info("AWS Rekognition client initialized (region: %s)", region)
        return self._client

    def detect_labels(self, image_bytes: bytes, min_confidence: float | None = None) -> ImageAnalysis:
        """
        Detect labels/objects in an image.

        Args:
            image_bytes: Image data
            min_confidence: Minimum confidence (0-100); defaults to settings

        Raises:
            RekognitionError: If the image is empty or Rekognition fails
        """
        if not image_bytes:
            raise RekognitionError("Label detection failed: image is empty")
        if min_confidence is None:
            min_confidence = get_settings().min_label_confidence

        try:
            response = self.client.detect_labels(
                Image={"Bytes": image_bytes},
                MinConfidence=float(min_confidence),
                MaxLabels=MAX_LABELS,
            )
        except (BotoCoreError, ClientError) as e:
            logger.error("Rekognition detect_labels failed: %s", e)
            raise RekognitionError(f"Label detection failed: {e}") from e

        labels = [
            DetectedLabel(name=label.get("Name", ""), confidence=float(label.get("Confidence", 0.0)))
            for label in response.get("Labels", [])
        ]
        logger.info("Detected %d labels", len(labels))
        return ImageAnalysis(labels=labels, total_detections=len(labels))

    def recognize_celebrities(self, image_bytes: bytes) -> ImageAnalysis:
        """
        Recognize celebrity faces in an image.

        Raises:
            RekognitionError: If the image is empty or Rekognition fails
        """
        if not image_bytes:
            raise RekognitionError("Celebrity recognition failed: image is empty")

        try:
            response = self.client.recognize_celebrities(Image={"Bytes": image_bytes})
        except (BotoCoreError, ClientError) as e:
            logger.error("Rekognition recognize_celebrities failed: %s", e)
            raise RekognitionError(f"Celebrity recognition failed: {e}") from e

        celebrities = [
            Celebrity(
                name=face.get("Name", ""),
                match_confidence=float(face.get("MatchConfidence", 0.0)),
                urls=list(face.get("Urls", [])),
            )
            for face in response.get("CelebrityFaces", [])
        ]
        logger.info("Recognized %d celebrities", len(celebrities))
        return ImageAnalysis(celebrities=celebrities, total_detections=len(celebrities))


_gateway: RekognitionGateway | None = None


def get_rekognition_gateway() -> RekognitionGateway:
    """Get the process-wide Rekognition gateway."""
    global _gateway
    if _gateway is None:
        _gateway = RekognitionGateway()
    return _gateway
