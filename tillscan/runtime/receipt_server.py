"""FastAPI server for receipt OCR, stored receipts and image recognition."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Any

from fastapi import Depends, FastAPI, File, Query, Request, UploadFile
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from tillscan.application.receipts import extract_document_lines, process_document, run_get_receipt, run_list_receipts
from tillscan.application.recognition import run_celebrity_recognition, run_label_detection
from tillscan.receipt.formatter import image_analysis_to_dict, receipt_to_dict
from tillscan.runtime import get_logger, get_settings
from tillscan.runtime.errors import ReceiptNotFound, RekognitionError, TextractError, UploadTooLarge
from tillscan.runtime.receipt_storage import ReceiptStore, get_receipt_store
from tillscan.runtime.rekognition_gateway import RekognitionGateway, get_rekognition_gateway
from tillscan.runtime.textract_gateway import TextractGateway, get_textract_gateway

logger = get_logger(__name__)

TEXTRACT_PREFIX = "/api/v1/textract"
REKOGNITION_PREFIX = "/api/v1/rekognition"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Create the receipt store directory on startup."""
    get_settings().ensure_data_dir()
    yield


app = FastAPI(
    title="Receipt Scanner",
    description="Receipt text extraction and parsing with AWS Textract, plus image analysis with AWS Rekognition",
    version="1.0.0",
    lifespan=lifespan,
)


def _error_response(status_code: int, error: str, message: str) -> JSONResponse:
    return JSONResponse(
        {
            "timestamp": datetime.now().isoformat(),
            "status": status_code,
            "error": error,
            "message": message,
        },
        status_code=status_code,
    )


@app.exception_handler(TextractError)
async def handle_textract_error(request: Request, exc: TextractError) -> JSONResponse:
    logger.error("Textract exception: %s", exc)
    return _error_response(500, "Textract Processing Error", str(exc))


@app.exception_handler(RekognitionError)
async def handle_rekognition_error(request: Request, exc: RekognitionError) -> JSONResponse:
    logger.error("Rekognition exception: %s", exc)
    return _error_response(500, "Rekognition Processing Error", str(exc))


@app.exception_handler(ReceiptNotFound)
async def handle_receipt_not_found(request: Request, exc: ReceiptNotFound) -> JSONResponse:
    logger.error("Receipt not found: %s", exc)
    return _error_response(404, "Receipt Not Found", str(exc))


@app.exception_handler(UploadTooLarge)
async def handle_upload_too_large(request: Request, exc: UploadTooLarge) -> JSONResponse:
    logger.error("File size exceeded: %s", exc)
    return _error_response(400, "File Size Exceeded", str(exc))


@app.exception_handler(ValueError)
async def handle_bad_request(request: Request, exc: ValueError) -> JSONResponse:
    logger.error("Invalid argument: %s", exc)
    return _error_response(400, "Bad Request", str(exc))


@app.exception_handler(Exception)
async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unexpected error: %s", exc)
    return _error_response(500, "Internal Server Error", "An unexpected error occurred. Please try again later.")


async def _read_upload(file: UploadFile) -> bytes:
    """Read an uploaded file, rejecting empty uploads."""
    contents = await file.read()
    if not contents:
        raise ValueError("Uploaded file is empty")
    logger.debug("Received upload %s (%d bytes)", file.filename, len(contents))
    return contents


@app.post(f"{TEXTRACT_PREFIX}/extract")
async def extract_text(
    file: UploadFile = File(...),
    gateway: TextractGateway = Depends(get_textract_gateway),
) -> dict[str, Any]:
    """Extract raw text lines from an uploaded image or document."""
    contents = await _read_upload(file)
    lines = await run_in_threadpool(extract_document_lines, contents, gateway)
    return {"lines": lines}


@app.post(f"{TEXTRACT_PREFIX}/receipts/process")
async def process_receipt(
    file: UploadFile = File(...),
    gateway: TextractGateway = Depends(get_textract_gateway),
    store: ReceiptStore = Depends(get_receipt_store),
) -> dict[str, Any]:
    """Process a receipt image and save the parsed receipt."""
    logger.info("Processing receipt image: %s", file.filename)
    contents = await _read_upload(file)
    receipt = await run_in_threadpool(process_document, contents, gateway, store)
    return receipt_to_dict(receipt)


@app.get(f"{TEXTRACT_PREFIX}/receipts")
async def list_receipts(store: ReceiptStore = Depends(get_receipt_store)) -> list[dict[str, Any]]:
    """Get all stored receipts."""
    listing = await run_in_threadpool(run_list_receipts, store)
    return [receipt_to_dict(receipt) for receipt in listing.receipts]


@app.get(f"{TEXTRACT_PREFIX}/receipts/{{receipt_id}}")
async def get_receipt(receipt_id: int, store: ReceiptStore = Depends(get_receipt_store)) -> dict[str, Any]:
    """Get one stored receipt by id."""
    receipt = await run_in_threadpool(run_get_receipt, store, receipt_id)
    return receipt_to_dict(receipt)


@app.post(f"{REKOGNITION_PREFIX}/labels")
async def detect_labels(
    file: UploadFile = File(...),
    min_confidence: float | None = Query(None, alias="minConfidence", ge=0.0, le=100.0),
    gateway: RekognitionGateway = Depends(get_rekognition_gateway),
) -> dict[str, Any]:
    """Detect labels and objects in an image."""
    contents = await _read_upload(file)
    analysis = await run_in_threadpool(run_label_detection, contents, gateway, min_confidence)
    return image_analysis_to_dict(analysis)


@app.post(f"{REKOGNITION_PREFIX}/celebrities")
async def recognize_celebrities(
    file: UploadFile = File(...),
    gateway: RekognitionGateway = Depends(get_rekognition_gateway),
) -> dict[str, Any]:
    """Recognize celebrities in an image."""
    contents = await _read_upload(file)
    analysis = await run_in_threadpool(run_celebrity_recognition, contents, gateway)
    return image_analysis_to_dict(analysis)


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    from tillscan.runtime.config import DEFAULT_SERVER_HOST, DEFAULT_SERVER_PORT

    uvicorn.run(app, host=DEFAULT_SERVER_HOST, port=DEFAULT_SERVER_PORT)
