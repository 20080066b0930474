import json
from pathlib import Path

import pytest
from _pytest.monkeypatch import MonkeyPatch

from tillscan.cli.main import build_parser, main
from tillscan.domain.recognition import DetectedLabel, ImageAnalysis
from tillscan.runtime import rekognition_gateway, textract_gateway
from tillscan.runtime.config import DEFAULT_SERVER_HOST, DEFAULT_SERVER_PORT
from tillscan.runtime.receipt_storage import get_receipt_store


class _FakeTextract:
    def __init__(self, lines: list[str]) -> None:
        self.lines = lines

    def extract_lines(self, document_bytes: bytes) -> list[str]:
        return list(self.lines)


class _FakeRekognition:
    def detect_labels(self, image_bytes: bytes, min_confidence: float | None = None) -> ImageAnalysis:
        return ImageAnalysis(labels=[DetectedLabel("Paper", min_confidence or 0.0)], total_detections=1)


def _write_lines(tmp_path: Path, lines: list[str]) -> Path:
    lines_file = tmp_path / "lines.txt"
    lines_file.write_text("\n".join(lines), encoding="utf-8")
    return lines_file


def test_no_command_prints_help() -> None:
    assert main([]) == 1


def test_parser_defaults() -> None:
    args = build_parser().parse_args(["serve"])

    assert (args.host, args.port) == (DEFAULT_SERVER_HOST, DEFAULT_SERVER_PORT) == ("127.0.0.1", 8080)


def test_parse_prints_summary(tmp_path: Path, sample_receipt_lines: list[str], capsys: pytest.CaptureFixture) -> None:
    exit_code = main(["parse", str(_write_lines(tmp_path, sample_receipt_lines))])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "PARSED RECEIPT" in out
    assert "Company: Fresh Mart" in out


def test_parse_json(tmp_path: Path, sample_receipt_lines: list[str], capsys: pytest.CaptureFixture) -> None:
    exit_code = main(["parse", str(_write_lines(tmp_path, sample_receipt_lines)), "--json"])

    data = json.loads(capsys.readouterr().out)
    assert exit_code == 0
    assert data["cashierNumber"] == "#3"
    assert data["id"] is None


def test_parse_missing_file_exits_with_error(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    exit_code = main(["parse", str(tmp_path / "missing.txt")])

    assert exit_code == 1
    assert "Lines file not found" in capsys.readouterr().out


def test_scan_saves_then_list_and_show(
    tmp_path: Path,
    sample_receipt_lines: list[str],
    monkeypatch: MonkeyPatch,
    capsys: pytest.CaptureFixture,
) -> None:
    image = tmp_path / "receipt.jpg"
    image.write_bytes(b"raw document")
    monkeypatch.setattr(textract_gateway, "get_textract_gateway", lambda: _FakeTextract(sample_receipt_lines))

    assert main(["scan", str(image)]) == 0
    assert "Saved as receipt #1" in capsys.readouterr().out

    assert main(["list"]) == 0
    listing = capsys.readouterr().out
    assert "Stored receipts (1)" in listing
    assert "Fresh Mart" in listing

    assert main(["show", "1", "--json"]) == 0
    assert json.loads(capsys.readouterr().out)["id"] == 1


def test_scan_no_save_leaves_store_empty(
    tmp_path: Path,
    sample_receipt_lines: list[str],
    monkeypatch: MonkeyPatch,
    capsys: pytest.CaptureFixture,
) -> None:
    image = tmp_path / "receipt.jpg"
    image.write_bytes(b"raw document")
    monkeypatch.setattr(textract_gateway, "get_textract_gateway", lambda: _FakeTextract(sample_receipt_lines))

    assert main(["scan", str(image), "--no-save"]) == 0
    assert "Saved as receipt" not in capsys.readouterr().out
    assert get_receipt_store().find_all() == []


def test_scan_missing_image_exits_with_error(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    assert main(["scan", str(tmp_path / "missing.jpg")]) == 1
    assert "Receipt file not found" in capsys.readouterr().out


def test_show_missing_receipt(capsys: pytest.CaptureFixture) -> None:
    assert main(["show", "5"]) == 1
    assert "Receipt not found with id: 5" in capsys.readouterr().out


def test_list_empty_store(capsys: pytest.CaptureFixture) -> None:
    assert main(["list"]) == 0
    assert "No receipts found" in capsys.readouterr().out


def test_labels_prints_json(tmp_path: Path, monkeypatch: MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    image = tmp_path / "photo.jpg"
    image.write_bytes(b"raw image")
    monkeypatch.setattr(rekognition_gateway, "get_rekognition_gateway", lambda: _FakeRekognition())

    assert main(["labels", str(image), "--min-confidence", "70"]) == 0
    assert json.loads(capsys.readouterr().out)["labels"] == [{"name": "Paper", "confidence": 70.0}]
