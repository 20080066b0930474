"""Data models for image label and celebrity recognition results."""

from dataclasses import dataclass, field


@dataclass
class DetectedLabel:
    name: str
    confidence: float


@dataclass
class Celebrity:
    name: str
    match_confidence: float
    urls: list[str] = field(default_factory=list)


@dataclass
class ImageAnalysis:
    """Result of one recognition call; only one of the lists is filled."""

    labels: list[DetectedLabel] = field(default_factory=list)
    celebrities: list[Celebrity] = field(default_factory=list)
    total_detections: int = 0
