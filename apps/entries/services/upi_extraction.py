"""UPI extraction service - recover the payee UPI id from decoded QR text."""

from urllib.parse import parse_qs

from .exceptions import UPIExtractionError

UPI_SCHEME_PREFIX = 'upi://'
PAYEE_ADDRESS_KEY = 'pa'


def extract_upi_id(text: str) -> str:
    """
    Extract the UPI id from a decoded QR payload.

    Two payload shapes are accepted:

    1. A ``upi://`` deep link, e.g. ``upi://pay?pa=shop@okaxis&pn=Shop``.
       The query string (everything after the first ``?``) is parsed with
       standard URL query decoding and the ``pa`` (payee address) value is
       returned.
    2. Anything else is taken to be a bare UPI id; surrounding whitespace is
       stripped.

    The id is returned exactly as extracted, with no case folding.

    Args:
        text: Decoded QR text (untrusted)

    Returns:
        The UPI id

    Raises:
        UPIExtractionError: If no non-blank UPI id can be recovered. A
            ``upi://`` link without a query string or without ``pa`` fails
            rather than yielding an empty id.
    """
    if text is None:
        raise UPIExtractionError("Could not extract UPI ID from QR code")

    if text.startswith(UPI_SCHEME_PREFIX):
        _, separator, query = text.partition('?')
        if not separator:
            raise UPIExtractionError("UPI link has no query string")

        params = parse_qs(query, keep_blank_values=True)
        values = params.get(PAYEE_ADDRESS_KEY) or ['']
        upi_id = values[0]
    else:
        upi_id = text.strip()

    if not upi_id.strip():
        raise UPIExtractionError("Could not extract UPI ID from QR code")

    return upi_id
