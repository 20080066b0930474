import pytest
from botocore.exceptions import ClientError

from tillscan.domain.recognition import Celebrity, DetectedLabel
from tillscan.runtime.errors import RekognitionError
from tillscan.runtime.rekognition_gateway import MAX_LABELS, RekognitionGateway


class _FakeRekognitionClient:
    def __init__(self, error=None):
        self.error = error
        self.calls = []

    def detect_labels(self, **kwargs):
        self.calls.append(("detect_labels", kwargs))
        if self.error is not None:
            raise self.error
        return {"Labels": [{"Name": "Dog", "Confidence": 97.5}, {"Name": "Pet", "Confidence": 91.0}]}

    def recognize_celebrities(self, **kwargs):
        self.calls.append(("recognize_celebrities", kwargs))
        if self.error is not None:
            raise self.error
        return {
            "CelebrityFaces": [{"Name": "Someone Famous", "MatchConfidence": 99.0, "Urls": ["www.example.com/x"]}],
            "UnrecognizedFaces": [{}],
        }


def test_detect_labels_uses_configured_default_confidence() -> None:
    client = _FakeRekognitionClient()

    analysis = RekognitionGateway(client=client).detect_labels(b"image")

    assert analysis.labels == [DetectedLabel("Dog", 97.5), DetectedLabel("Pet", 91.0)]
    assert analysis.total_detections == 2
    assert client.calls == [
        ("detect_labels", {"Image": {"Bytes": b"image"}, "MinConfidence": 80.0, "MaxLabels": MAX_LABELS})
    ]


def test_detect_labels_explicit_confidence() -> None:
    client = _FakeRekognitionClient()

    RekognitionGateway(client=client).detect_labels(b"image", min_confidence=55)

    assert client.calls[0][1]["MinConfidence"] == 55.0


def test_recognize_celebrities_maps_faces() -> None:
    analysis = RekognitionGateway(client=_FakeRekognitionClient()).recognize_celebrities(b"image")

    assert analysis.celebrities == [Celebrity("Someone Famous", 99.0, ["www.example.com/x"])]
    assert analysis.labels == []
    assert analysis.total_detections == 1


def test_client_errors_become_rekognition_errors() -> None:
    error = ClientError({"Error": {"Code": "ImageTooLargeException", "Message": "too big"}}, "DetectLabels")
    gateway = RekognitionGateway(client=_FakeRekognitionClient(error=error))

    with pytest.raises(RekognitionError):
        gateway.detect_labels(b"image")
    with pytest.raises(RekognitionError):
        gateway.recognize_celebrities(b"image")


def test_empty_image_is_rejected() -> None:
    with pytest.raises(RekognitionError):
        RekognitionGateway(client=_FakeRekognitionClient()).detect_labels(b"")
