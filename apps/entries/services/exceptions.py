"""
Domain exceptions for entries app.

Exception Hierarchy:
    EntriesServiceError (base)
    ├── SubmissionValidationError
    ├── InvalidPaginationError
    ├── UnreadableQRCodeError
    │   ├── QRDecodeError
    │   └── UPIExtractionError
    └── DuplicateSubmissionError

Not-found conditions reuse LinkNotFoundError (links app) and
EmployeeNotFoundError (accounts app).

None of these are retried internally; the caller decides whether to
resubmit with corrected input.
"""


class EntriesServiceError(Exception):
    """Base exception for all entries service errors."""
    pass


class SubmissionValidationError(EntriesServiceError):
    """Required submission input is missing or malformed."""
    pass


class InvalidPaginationError(EntriesServiceError):
    """Page or limit is not a positive integer."""
    pass


class UnreadableQRCodeError(EntriesServiceError):
    """
    The uploaded QR code did not yield a UPI id.

    Callers treat decode and extraction failures the same way: ask for a
    clearer image.
    """
    pass


class QRDecodeError(UnreadableQRCodeError):
    """Image is invalid, has no QR pattern, or the payload cannot be corrected."""
    pass


class UPIExtractionError(UnreadableQRCodeError):
    """Decoded QR text carries no recoverable UPI id."""
    pass


class DuplicateSubmissionError(EntriesServiceError):
    """This UPI id has already been used for this link."""
    pass
