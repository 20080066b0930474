"""Exceptions raised at the boundary of external collaborators."""


class UpstreamError(RuntimeError):
    """Raised when an OCR or recognition call cannot be completed."""


class TextractError(UpstreamError):
    """Raised when the OCR (Textract) call fails."""


class RekognitionError(UpstreamError):
    """Raised when an image recognition (Rekognition) call fails."""


class ReceiptNotFound(LookupError):
    """Raised when a stored receipt lookup finds no record."""

    def __init__(self, receipt_id: int) -> None:
        super().__init__(f"Receipt not found with id: {receipt_id}")
        self.receipt_id = receipt_id


class UploadTooLarge(ValueError):
    """Raised when an uploaded document exceeds the configured size limit."""

    def __init__(self, size_bytes: int, limit_bytes: int) -> None:
        super().__init__(
            f"The uploaded file is too large ({size_bytes} bytes). "
            f"Maximum file size is {limit_bytes // (1024 * 1024)}MB."
        )
        self.size_bytes = size_bytes
        self.limit_bytes = limit_bytes
