"""
Tests for QR decoding and UPI extraction.

QR images are rendered with ``qrcode`` and decoded end to end, so these
exercise the real image pipeline rather than a mocked detector.
"""

import io
import pytest
from PIL import Image

from apps.entries.services import (
    decode_qr_image,
    extract_upi_id,
    resolve_upi_id,
    QRDecodeError,
    UPIExtractionError,
    UnreadableQRCodeError,
)
from .conftest import render_qr_png


def _png(img):
    buffer = io.BytesIO()
    img.save(buffer, format='PNG')
    return buffer.getvalue()


# =============================================================================
# UPI extraction
# =============================================================================

class TestExtractUpiId:
    """Tests for extract_upi_id()."""

    @pytest.mark.parametrize('text, expected', [
        ('upi://pay?pa=shop@okaxis&pn=Shop', 'shop@okaxis'),
        ('upi://pay?pn=Shop&pa=shop@okaxis&am=10.00', 'shop@okaxis'),
        ('upi://pay?pn=Tea%20Stall&pa=tea.stall%40ybl&cu=INR', 'tea.stall@ybl'),
        ('upi://pay?pa=A.Mixed.Case@HDFC', 'A.Mixed.Case@HDFC'),
        ('upi://mandate?pa=first@upi&pa=second@upi', 'first@upi'),
    ])
    def test_deep_link_returns_payee_address(self, text, expected):
        """The ``pa`` parameter is returned percent-decoded and unchanged otherwise."""
        assert extract_upi_id(text) == expected

    @pytest.mark.parametrize('text, expected', [
        ('shop@okaxis', 'shop@okaxis'),
        ('  shop@okaxis\n', 'shop@okaxis'),
        ('Some.Person@Paytm', 'Some.Person@Paytm'),
        ('https://example.com/pay?pa=x@y', 'https://example.com/pay?pa=x@y'),
    ])
    def test_bare_text_returned_trimmed(self, text, expected):
        """Anything that is not a upi:// link is the id itself, trimmed."""
        assert extract_upi_id(text) == expected

    def test_deep_link_without_payee_fails(self):
        with pytest.raises(UPIExtractionError):
            extract_upi_id('upi://pay?pn=Shop&am=10')

    def test_deep_link_without_query_fails(self):
        with pytest.raises(UPIExtractionError):
            extract_upi_id('upi://pay')

    def test_deep_link_with_blank_payee_fails(self):
        with pytest.raises(UPIExtractionError):
            extract_upi_id('upi://pay?pa=&pn=Shop')

    @pytest.mark.parametrize('text', ['', '   ', '\n\t'])
    def test_blank_text_fails(self, text):
        with pytest.raises(UPIExtractionError):
            extract_upi_id(text)

    def test_extraction_error_is_unreadable_qr(self):
        """Callers can treat extraction failure like a decode failure."""
        assert issubclass(UPIExtractionError, UnreadableQRCodeError)
        assert issubclass(QRDecodeError, UnreadableQRCodeError)


# =============================================================================
# QR decoding
# =============================================================================

class TestDecodeQrImage:
    """Tests for decode_qr_image()."""

    def test_decodes_upi_deep_link(self):
        payload = 'upi://pay?pa=canteen@okicici&pn=Canteen&cu=INR'

        assert decode_qr_image(render_qr_png(payload)) == payload

    def test_decodes_bare_upi_id(self):
        assert decode_qr_image(render_qr_png('driver.pay@ybl')) == 'driver.pay@ybl'

    def test_decodes_jpeg(self):
        img = Image.open(io.BytesIO(render_qr_png('jpeg.user@okaxis'))).convert('RGB')
        buffer = io.BytesIO()
        img.save(buffer, format='JPEG', quality=95)

        assert decode_qr_image(buffer.getvalue()) == 'jpeg.user@okaxis'

    def test_decodes_code_without_quiet_zone(self):
        """Images cropped tight to the code still decode."""
        png = render_qr_png('tight.crop@okaxis', border=0)

        assert decode_qr_image(png) == 'tight.crop@okaxis'

    def test_decodes_transparent_background(self):
        img = Image.open(io.BytesIO(render_qr_png('alpha@okaxis'))).convert('L')
        # Dark modules opaque, light modules fully transparent
        rgba = Image.new('RGBA', img.size, (0, 0, 0, 0))
        rgba.putalpha(img.point(lambda v: 255 if v < 128 else 0))

        assert decode_qr_image(_png(rgba)) == 'alpha@okaxis'

    def test_empty_buffer_fails(self):
        with pytest.raises(QRDecodeError) as exc:
            decode_qr_image(b'')

        assert 'Empty image' in str(exc.value)

    def test_non_image_bytes_fail(self):
        with pytest.raises(QRDecodeError):
            decode_qr_image(b'definitely not an image')

    def test_truncated_image_fails(self):
        png = render_qr_png('cut@okaxis')

        with pytest.raises(QRDecodeError):
            decode_qr_image(png[:len(png) // 3])

    def test_image_without_qr_fails(self):
        blank = _png(Image.new('L', (240, 240), color=255))

        with pytest.raises(QRDecodeError) as exc:
            decode_qr_image(blank)

        assert 'Failed to decode QR' in str(exc.value)


class TestResolveUpiId:
    """Decode and extract in one step."""

    def test_resolves_deep_link_image(self):
        png = render_qr_png('upi://pay?pa=vendor%40okhdfcbank&pn=Vendor')

        assert resolve_upi_id(png) == 'vendor@okhdfcbank'

    def test_deep_link_without_payee_raises_extraction_error(self):
        png = render_qr_png('upi://pay?pn=NoPayee')

        with pytest.raises(UPIExtractionError):
            resolve_upi_id(png)
