"""
Submission service - validate, decode, de-duplicate and persist entries.

A submission carries either a QR image (decoded to recover the UPI id) or,
for simpler callers, the UPI id itself. Both paths share validation and the
one-UPI-id-per-link rule.
"""

import logging
from decimal import Decimal, InvalidOperation
from typing import Optional
from uuid import UUID

from django.conf import settings
from django.db import transaction, IntegrityError

from apps.accounts.services import employee_exists, EmployeeNotFoundError
from apps.entries.models import Entry
from apps.links.services import link_exists, LinkNotFoundError
from .exceptions import (
    SubmissionValidationError,
    UnreadableQRCodeError,
    UPIExtractionError,
    DuplicateSubmissionError,
)
from .qr_decoding import decode_qr_image
from .upi_extraction import extract_upi_id

logger = logging.getLogger(__name__)

DUPLICATE_MESSAGE = "This UPI ID has already been used for this link"


def _max_length(field_name: str) -> int:
    return Entry._meta.get_field(field_name).max_length


def _clean_amount(amount) -> Decimal:
    """Coerce amount to a positive Decimal with at most two decimal places."""
    try:
        value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    except (InvalidOperation, ValueError, TypeError):
        raise SubmissionValidationError("amount must be a number")

    if not value.is_finite() or value <= 0:
        raise SubmissionValidationError("amount must be greater than zero")

    if value.as_tuple().exponent < -2:
        raise SubmissionValidationError("amount must have at most two decimal places")

    field = Entry._meta.get_field('amount')
    if value >= Decimal(10) ** (field.max_digits - field.decimal_places):
        raise SubmissionValidationError("amount is too large")

    return value


def _clean_name(name) -> str:
    name = str(name).strip() if name is not None else ''
    if len(name) > _max_length('name'):
        raise SubmissionValidationError(
            f"name must be at most {_max_length('name')} characters"
        )
    return name


def _upi_id_taken(link_id, upi_id) -> bool:
    return Entry.objects.filter(link_id=link_id, upi_id=upi_id).exists()


def _validate_submission(*, link_id, employee_id, name, amount, qr_image, upi_id):
    """Check required input and return the normalised ``(name, amount)``."""
    name = _clean_name(name)
    if not link_id or not employee_id or not name or not amount:
        raise SubmissionValidationError("name, amount and employeeId are all required")

    has_image = bool(qr_image)
    has_upi_id = upi_id is not None and bool(str(upi_id).strip())

    if not has_image and not has_upi_id:
        raise SubmissionValidationError("QR image file (qr_image) is required")
    if has_image and has_upi_id:
        raise SubmissionValidationError("Provide either a QR image or a UPI ID, not both")

    if has_image and len(qr_image) > settings.QR_MAX_IMAGE_BYTES:
        raise SubmissionValidationError(
            f"QR image exceeds {settings.QR_MAX_IMAGE_BYTES} bytes"
        )
    if has_upi_id and len(str(upi_id).strip()) > _max_length('upi_id'):
        raise SubmissionValidationError(
            f"upi_id must be at most {_max_length('upi_id')} characters"
        )

    return name, _clean_amount(amount)


def resolve_upi_id(qr_image: bytes) -> str:
    """
    Decode a QR image and extract its UPI id.

    Raises:
        QRDecodeError: If the image cannot be decoded
        UPIExtractionError: If the decoded text carries no UPI id
    """
    try:
        text = decode_qr_image(qr_image)
    except UnreadableQRCodeError as e:
        logger.warning("QR decode error: %s", e)
        raise

    try:
        upi_id = extract_upi_id(text)
    except UnreadableQRCodeError as e:
        logger.info("No UPI id in decoded QR payload: %s", e)
        raise

    if len(upi_id) > _max_length('upi_id'):
        logger.info("Decoded UPI id is %d characters, over the limit", len(upi_id))
        raise UPIExtractionError(
            f"UPI ID in QR code is longer than {_max_length('upi_id')} characters"
        )

    return upi_id


def submit_entry(
    *,
    link_id: UUID,
    employee_id: UUID,
    name: str,
    amount,
    qr_image: Optional[bytes] = None,
    upi_id: Optional[str] = None
) -> Entry:
    """
    Record one payment submission against a link.

    This operation:
    1. Validates required input (before any decoding work)
    2. Checks the link and employee exist
    3. Decodes the QR image and extracts the UPI id, unless the caller
       supplied the UPI id directly
    4. Rejects a UPI id already used for this link
    5. Inserts the entry; the (link, upi_id) unique constraint rejects the
       loser of a concurrent race, which is reported as a duplicate too

    Args:
        link_id: Link being submitted against
        employee_id: Stable identifier of the submitting employee
        name: Submitter-provided display name
        amount: Positive amount (Decimal, str or number)
        qr_image: Raw QR image bytes
        upi_id: UPI id supplied directly instead of an image

    Returns:
        Created Entry instance

    Raises:
        SubmissionValidationError: Missing/malformed input
        LinkNotFoundError: Link does not exist
        EmployeeNotFoundError: Employee does not exist
        QRDecodeError: Image could not be decoded
        UPIExtractionError: Decoded text has no UPI id
        DuplicateSubmissionError: UPI id already used for this link
    """
    name, amount = _validate_submission(
        link_id=link_id,
        employee_id=employee_id,
        name=name,
        amount=amount,
        qr_image=qr_image,
        upi_id=upi_id,
    )

    if not link_exists(link_id=link_id):
        raise LinkNotFoundError("Link not found")
    if not employee_exists(employee_id=employee_id):
        raise EmployeeNotFoundError("Employee not found")

    if qr_image:
        upi_id = resolve_upi_id(qr_image)
    else:
        upi_id = str(upi_id).strip()

    # Fast path only; the unique constraint below is what actually guards
    if _upi_id_taken(link_id, upi_id):
        logger.info("Rejected duplicate UPI id for link %s (pre-check)", link_id)
        raise DuplicateSubmissionError(DUPLICATE_MESSAGE)

    try:
        with transaction.atomic():
            entry = Entry.objects.create(
                link_id=link_id,
                employee_id=employee_id,
                name=name,
                upi_id=upi_id,
                amount=amount,
            )
    except IntegrityError:
        if _upi_id_taken(link_id, upi_id):
            logger.info("Rejected duplicate UPI id for link %s (constraint)", link_id)
            raise DuplicateSubmissionError(DUPLICATE_MESSAGE)
        raise

    logger.info("Entry %s submitted for link %s by employee %s", entry.id, link_id, employee_id)
    return entry
