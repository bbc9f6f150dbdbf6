"""
QR decoding via OpenCV.

The decoder is treated as a black box: it yields one result per detected
symbol, either a decoded payload or an error message.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

import cv2
from PIL import Image

from .imaging import to_bgr

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DecodeResult:
    payload: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.payload is not None


def decode_qr(image: Image.Image) -> List[DecodeResult]:
    """Detect and decode every QR code in `image`."""
    detector = cv2.QRCodeDetector()
    img = to_bgr(image)
    results: List[DecodeResult] = []

    # Try multi first
    try:
        found, texts, points, _ = detector.detectAndDecodeMulti(img)
    except cv2.error as exc:
        logger.debug("Multi QR detection failed: %s", exc)
        found, texts, points = False, None, None

    if found and texts is not None and points is not None:
        for text in texts:
            if text:
                results.append(DecodeResult(payload=text))
            else:
                results.append(DecodeResult(error="QR code detected but could not be decoded"))
        if any(r.ok for r in results):
            return results

    # Single fallback
    try:
        text, points, _ = detector.detectAndDecode(img)
    except cv2.error as exc:
        return results + [DecodeResult(error=f"QR detection failed: {exc}")]

    if text:
        return [DecodeResult(payload=text)]
    if points is not None and not results:
        results.append(DecodeResult(error="QR code detected but could not be decoded"))
    return results


def first_payload(results: List[DecodeResult]) -> Optional[str]:
    """Return the first successfully decoded payload, logging failures."""
    if not results:
        logger.info("No QR codes found in the image.")
        return None

    for result in results:
        if result.ok:
            logger.info("QR successfully decoded from image!")
            return result.payload
        logger.info("Failed to decode QR code: %s", result.error)

    return None
