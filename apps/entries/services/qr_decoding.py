"""
QR decoding service - turn an uploaded image into the QR payload text.

The image is opened with Pillow (any format it supports), flattened to
8-bit grayscale and handed to OpenCV's QR detector. The decoded text is
returned as-is; callers must treat it as untrusted input.
"""

import io
import logging

import cv2
import numpy as np
from PIL import Image, ImageOps, UnidentifiedImageError

from .exceptions import QRDecodeError

logger = logging.getLogger(__name__)

# White margin added on the second attempt, for images cropped tight to the code
QUIET_ZONE_PX = 32


def _load_grayscale(image_bytes: bytes) -> np.ndarray:
    """
    Decompress an image buffer into a 2-D uint8 array.

    Pillow reports corrupt PNG chunks as SyntaxError, truncated data as OSError.
    """
    try:
        with Image.open(io.BytesIO(image_bytes)) as img:
            img.load()
            if img.mode in ('RGBA', 'LA') or (img.mode == 'P' and 'transparency' in img.info):
                # Transparent pixels would otherwise flatten to black
                rgba = img.convert('RGBA')
                background = Image.new('RGBA', rgba.size, (255, 255, 255, 255))
                img = Image.alpha_composite(background, rgba)
            gray = img.convert('L')
    except (UnidentifiedImageError, OSError, SyntaxError, ValueError, Image.DecompressionBombError) as e:
        raise QRDecodeError(f"Not a readable image: {e}")

    return np.asarray(gray, dtype=np.uint8)


def _detect(detector, pixels: np.ndarray) -> str:
    try:
        data, _points, _straight = detector.detectAndDecode(pixels)
    except cv2.error as e:
        logger.debug("OpenCV QR detector failed: %s", e)
        return ''
    return data or ''


def decode_qr_image(image_bytes: bytes) -> str:
    """
    Decode the QR code contained in an image buffer.

    Args:
        image_bytes: Raw uploaded file contents (PNG, JPEG, ...)

    Returns:
        The decoded QR payload text

    Raises:
        QRDecodeError: If the buffer is not an image, holds no QR pattern,
            or the payload cannot be error-corrected

    Example:
        >>> decode_qr_image(open('pay.png', 'rb').read())
        'upi://pay?pa=merchant@okaxis&pn=Merchant'
    """
    if not image_bytes:
        raise QRDecodeError("Empty image")

    pixels = _load_grayscale(image_bytes)
    detector = cv2.QRCodeDetector()

    text = _detect(detector, pixels)
    if not text:
        padded = np.asarray(
            ImageOps.expand(Image.fromarray(pixels), border=QUIET_ZONE_PX, fill=255),
            dtype=np.uint8,
        )
        text = _detect(detector, padded)

    if not text:
        raise QRDecodeError("Failed to decode QR")

    return text
