"""
End-to-end check of a QR image: decode the payload, then verify the overlay.

Decoding runs on a resized copy to help the decoder; verification always
runs on the original pixels.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from PIL import Image

from .config import SETTINGS
from .decoding import decode_qr, first_payload
from .imaging import ImageSource, load_image, resize_for_decode
from .watermark.fingerprint import Payload
from .watermark.verify import OverlayReport, inspect_overlay

logger = logging.getLogger(__name__)

NO_PAYLOAD = "no QR code could be decoded"


@dataclass
class ScanResult:
    decoded: bool
    ok: bool
    payload: Optional[str] = None
    reason: Optional[str] = None
    decode_errors: List[str] = field(default_factory=list)
    report: Optional[OverlayReport] = None


def verify_claim(
    image: Image.Image,
    claimed_payload: Payload,
    white_level: Optional[int] = None,
) -> ScanResult:
    """Verify `image` against a payload supplied by the caller."""
    level = SETTINGS.white_level if white_level is None else white_level
    report = inspect_overlay(image, claimed_payload, level)
    payload = claimed_payload if isinstance(claimed_payload, str) else None
    return ScanResult(
        decoded=True,
        ok=report.ok,
        payload=payload,
        reason=report.reason,
        report=report,
    )


def scan_image(
    image: Image.Image,
    decode_size: Optional[int] = None,
    white_level: Optional[int] = None,
) -> ScanResult:
    """Decode the QR code in `image` and verify its overlay."""
    size = SETTINGS.decode_size if decode_size is None else decode_size

    results = decode_qr(resize_for_decode(image, size))
    errors = [r.error for r in results if r.error]
    message = first_payload(results)

    if message is None:
        logger.info("Failed to decode the QR code.")
        return ScanResult(decoded=False, ok=False, reason=NO_PAYLOAD, decode_errors=errors)

    logger.info("Decoded message: %s", message)
    result = verify_claim(image, message, white_level)
    result.decode_errors = errors
    logger.info("Verification: %s", "valid" if result.ok else "invalid")
    return result


def process_qr_code(
    source: ImageSource,
    decode_size: Optional[int] = None,
    white_level: Optional[int] = None,
) -> ScanResult:
    """Load an image from a path or bytes and run `scan_image` on it."""
    return scan_image(load_image(source), decode_size, white_level)
