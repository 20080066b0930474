"""Pure OCR transformation helpers for receipt parsing."""

import io
from typing import Any

MAX_IMAGE_DIMENSION = 3000  # Resize if either dimension exceeds this
OCR_IMAGE_PADDING = 50  # White padding around image to prevent edge truncation

# Leading bytes of formats Textract reads directly without re-encoding
_PASSTHROUGH_SIGNATURES = (b"%PDF", b"II*\x00", b"MM\x00*")


def resize_image_bytes(
    image_bytes: bytes, max_dimension: int = MAX_IMAGE_DIMENSION, padding: int = OCR_IMAGE_PADDING
) -> bytes:
    """
    Resize image bytes if it exceeds max_dimension on either side.

    Also adds white padding around the image to prevent OCR edge truncation.

    Args:
        image_bytes: Image data as bytes
        max_dimension: Maximum allowed dimension (width or height)
        padding: White padding to add around image (pixels)

    Returns:
        Image bytes (JPEG format), resized if necessary, with padding added
    """
    from PIL import Image, ImageOps

    img = Image.open(io.BytesIO(image_bytes))

    # Apply EXIF orientation so phone photos reach OCR upright
    img = ImageOps.exif_transpose(img)

    width, height = img.size

    if width <= max_dimension and height <= max_dimension:
        img_final = img
    else:
        if width > height:
            new_width = max_dimension
            new_height = int(height * (max_dimension / width))
        else:
            new_height = max_dimension
            new_width = int(width * (max_dimension / height))

        img_final = img.resize((new_width, new_height), Image.Resampling.LANCZOS)

    if padding > 0:
        img_final = ImageOps.expand(img_final, border=padding, fill="white")

    buffer = io.BytesIO()
    img_final.convert("RGB").save(buffer, format="JPEG", quality=95)
    return buffer.getvalue()


def prepare_document_bytes(document_bytes: bytes) -> bytes:
    """
    Normalize an uploaded document before it is sent to OCR.

    Photos are resized and padded; PDF/TIFF documents, anything Pillow
    cannot decode and images over Pillow's pixel limit are passed through
    unchanged for the OCR service to judge.
    """
    if document_bytes.startswith(_PASSTHROUGH_SIGNATURES):
        return document_bytes

    from PIL import Image, UnidentifiedImageError

    try:
        return resize_image_bytes(document_bytes)
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError):
        return document_bytes


def lines_from_textract_response(response: dict[str, Any]) -> list[str]:
    """
    Transform a Textract ``detect_document_text`` response into text lines.

    Keeps LINE blocks in response order (top-to-bottom reading order) and
    drops WORD/PAGE blocks and blank lines.
    """
    lines: list[str] = []
    for block in response.get("Blocks", []):
        if block.get("BlockType") != "LINE":
            continue
        text = (block.get("Text") or "").strip()
        if text:
            lines.append(text)
    return lines
