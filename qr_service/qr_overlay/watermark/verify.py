"""
Overlay verification logic.

A genuine image carries the first bits of SHA-256(payload) in the
separator strips next to its finder patterns:

- The image is converted to 8-bit grayscale.
- It must be square and at least 21 pixels wide, one pixel per module.
  Anything else is reported as `ok=False`, not raised.
- The overlay path (see `geometry.py`) is walked to collect the observed
  bits, which must equal the reference bits exactly.

A single flipped pixel on the path invalidates the image.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import List, Optional

from ..imaging import ImageLike, to_grayscale
from .bits import WHITE, walk
from .fingerprint import Payload, derive
from .geometry import MIN_MODULE_COUNT, OVERLAY_BIT_COUNT, overlay_segments

logger = logging.getLogger(__name__)

# Number of digest bits carried by the overlay.
REFERENCE_BIT_COUNT = 45

if OVERLAY_BIT_COUNT != REFERENCE_BIT_COUNT:
    raise RuntimeError(
        f"overlay path visits {OVERLAY_BIT_COUNT} modules "
        f"but {REFERENCE_BIT_COUNT} reference bits are compared"
    )

RESOLUTION_INCORRECT = "image resolution is incorrect"
OVERLAY_MISMATCH = "overlay does not match payload"


@dataclass
class OverlayReport:
    ok: bool
    width: int
    height: int
    reason: Optional[str] = None
    observed_bits: List[int] = field(default_factory=list)
    reference_bits: List[int] = field(default_factory=list)
    mismatched_bits: int = 0
    latency_ms: int = 0


def _elapsed_ms(start: float) -> int:
    return int((time.perf_counter() - start) * 1000)


def inspect_overlay(
    image: ImageLike,
    claimed_payload: Payload,
    white_level: int = WHITE,
) -> OverlayReport:
    """
    Compare the overlay carried by `image` against `claimed_payload`.

    `image` must be the original, unscaled rendering; resizing breaks the
    pixel-to-module correspondence.
    """
    start = time.perf_counter()

    grid = to_grayscale(image)
    height, width = grid.shape

    if width != height or width < MIN_MODULE_COUNT:
        logger.info("Image resolution is incorrect (%dx%d)", width, height)
        return OverlayReport(
            ok=False,
            width=width,
            height=height,
            reason=RESOLUTION_INCORRECT,
            latency_ms=_elapsed_ms(start),
        )

    reference = derive(claimed_payload, REFERENCE_BIT_COUNT)

    observed: List[int] = []
    for segment in overlay_segments(width):
        observed.extend(walk(grid, segment.start, segment.stop, segment.axis, white_level))

    ok = observed == reference
    mismatched = sum(1 for a, b in zip(observed, reference) if a != b)
    logger.debug("Overlay verdict ok=%s mismatched=%d", ok, mismatched)

    return OverlayReport(
        ok=ok,
        width=width,
        height=height,
        reason=None if ok else OVERLAY_MISMATCH,
        observed_bits=observed,
        reference_bits=reference,
        mismatched_bits=mismatched,
        latency_ms=_elapsed_ms(start),
    )


def verify_overlay(
    image: ImageLike,
    claimed_payload: Payload,
    white_level: int = WHITE,
) -> bool:
    """Return True only if the overlay exactly encodes `claimed_payload`."""
    return inspect_overlay(image, claimed_payload, white_level).ok
