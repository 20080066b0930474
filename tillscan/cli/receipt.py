"""Receipt and recognition command handlers used by the unified CLI."""

import argparse
import json
import sys
from pathlib import Path

from tillscan.domain.receipt import Receipt
from tillscan.receipt.formatter import format_receipt_summary, image_analysis_to_dict, receipt_to_dict
from tillscan.runtime import get_logger

logger = get_logger(__name__)


def _print_receipt(receipt: Receipt, as_json: bool = False) -> None:
    if as_json:
        print(json.dumps(receipt_to_dict(receipt), indent=2))
    else:
        print(format_receipt_summary(receipt))


def _read_image_or_exit(image: str) -> bytes:
    image_path = Path(image)
    if not image_path.exists():
        logger.error("Image file not found: %s", image_path)
        print(f"Error: Image file not found: {image_path}")
        sys.exit(1)
    return image_path.read_bytes()


def cmd_serve(args: argparse.Namespace) -> None:
    """Start the FastAPI server."""
    import uvicorn

    from tillscan.runtime import receipt_server as server

    print(f"Starting receipt server on {args.host}:{args.port}")
    print(f"Receipt endpoints: http://{args.host}:{args.port}/api/v1/textract/...")
    print("Press Ctrl+C to stop")

    uvicorn.run(server.app, host=args.host, port=args.port)


def cmd_parse(args: argparse.Namespace) -> None:
    """Parse a file of OCR lines and print the receipt."""
    from tillscan.application.receipts.scan import run_parse_lines_file

    lines_path = Path(args.lines_file)
    if not lines_path.exists():
        logger.error("Lines file not found: %s", lines_path)
        print(f"Error: Lines file not found: {lines_path}")
        sys.exit(1)

    receipt = run_parse_lines_file(lines_path)
    _print_receipt(receipt, as_json=args.json)


def cmd_scan(args: argparse.Namespace) -> None:
    """OCR a receipt image, parse it, and store it unless --no-save."""
    from tillscan.application.receipts.scan import ReceiptScanRequest, run_receipt_scan
    from tillscan.runtime.receipt_storage import get_receipt_store
    from tillscan.runtime.textract_gateway import get_textract_gateway

    result = run_receipt_scan(
        ReceiptScanRequest(
            document_path=Path(args.image),
            gateway=get_textract_gateway(),
            store=None if args.no_save else get_receipt_store(),
        )
    )

    if result.status == "file_not_found":
        logger.error("%s", result.error)
        print(f"Error: {result.error}")
        sys.exit(1)

    if result.status == "file_too_large":
        print(f"Error: {result.error}")
        sys.exit(1)

    if result.status == "ocr_unavailable":
        print(f"OCR failed: {result.error}")
        print("Check AWS credentials and region (TILLSCAN_AWS_REGION).")
        sys.exit(1)

    receipt = result.receipt
    if receipt is None:
        print("Scan failed: missing receipt output.")
        sys.exit(1)

    _print_receipt(receipt, as_json=args.json)
    if result.status == "saved":
        print(f"\nSaved as receipt #{receipt.id}")


def cmd_list(args: argparse.Namespace) -> None:
    """List stored receipts."""
    from tillscan.application.receipts.listing import run_list_receipts
    from tillscan.runtime.receipt_storage import get_receipt_store

    store = get_receipt_store()
    receipts = run_list_receipts(store).receipts

    if not receipts:
        print(f"No receipts found in {store.directory}")
        return

    print(f"\nStored receipts ({len(receipts)}):")
    print("-" * 60)
    for receipt in receipts:
        print(f"  #{receipt.id:<5} ${receipt.sub_total:>8.2f}  {len(receipt.items):>3} item(s)  {receipt.company_name}")
    print("-" * 60)


def cmd_show(args: argparse.Namespace) -> None:
    """Show one stored receipt."""
    from tillscan.application.receipts.listing import run_get_receipt
    from tillscan.runtime.errors import ReceiptNotFound
    from tillscan.runtime.receipt_storage import get_receipt_store

    try:
        receipt = run_get_receipt(get_receipt_store(), args.receipt_id)
    except ReceiptNotFound as exc:
        print(f"Error: {exc}")
        sys.exit(1)

    _print_receipt(receipt, as_json=args.json)


def cmd_labels(args: argparse.Namespace) -> None:
    """Detect labels in an image and print them as JSON."""
    from tillscan.application.recognition import run_label_detection
    from tillscan.runtime.errors import RekognitionError, UploadTooLarge
    from tillscan.runtime.rekognition_gateway import get_rekognition_gateway

    image_bytes = _read_image_or_exit(args.image)
    try:
        analysis = run_label_detection(image_bytes, get_rekognition_gateway(), min_confidence=args.min_confidence)
    except (RekognitionError, UploadTooLarge) as exc:
        print(f"Error: {exc}")
        sys.exit(1)

    print(json.dumps(image_analysis_to_dict(analysis), indent=2))


def cmd_celebrities(args: argparse.Namespace) -> None:
    """Recognize celebrities in an image and print them as JSON."""
    from tillscan.application.recognition import run_celebrity_recognition
    from tillscan.runtime.errors import RekognitionError, UploadTooLarge
    from tillscan.runtime.rekognition_gateway import get_rekognition_gateway

    image_bytes = _read_image_or_exit(args.image)
    try:
        analysis = run_celebrity_recognition(image_bytes, get_rekognition_gateway())
    except (RekognitionError, UploadTooLarge) as exc:
        print(f"Error: {exc}")
        sys.exit(1)

    print(json.dumps(image_analysis_to_dict(analysis), indent=2))
