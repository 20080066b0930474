"""Image recognition workflows."""

from tillscan.application.recognition.analyze import run_celebrity_recognition, run_label_detection

__all__ = [
    "run_celebrity_recognition",
    "run_label_detection",
]
