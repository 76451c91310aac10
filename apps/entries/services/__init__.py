"""
Entries services - Business logic layer.

Submission (QR decoding, UPI extraction, per-link de-duplication),
paginated aggregation and link reporting.
"""

from .qr_decoding import decode_qr_image
from .upi_extraction import extract_upi_id

from .submission import (
    submit_entry,
    resolve_upi_id,
)

from .aggregation import (
    get_entries_by_link,
    get_entries_by_employee,
    get_links_by_employee,
    get_employee_link_entries,
    get_my_link_entries,
    total_amount,
)

from .reporting import (
    get_link_summary,
    list_links_with_latest,
)

from .exceptions import (
    EntriesServiceError,
    SubmissionValidationError,
    InvalidPaginationError,
    UnreadableQRCodeError,
    QRDecodeError,
    UPIExtractionError,
    DuplicateSubmissionError,
)

__all__ = [
    # QR / UPI
    'decode_qr_image',
    'extract_upi_id',
    # Submission Services
    'submit_entry',
    'resolve_upi_id',
    # Aggregation Services
    'get_entries_by_link',
    'get_entries_by_employee',
    'get_links_by_employee',
    'get_employee_link_entries',
    'get_my_link_entries',
    'total_amount',
    # Reporting Services
    'get_link_summary',
    'list_links_with_latest',
    # Exceptions
    'EntriesServiceError',
    'SubmissionValidationError',
    'InvalidPaginationError',
    'UnreadableQRCodeError',
    'QRDecodeError',
    'UPIExtractionError',
    'DuplicateSubmissionError',
]
