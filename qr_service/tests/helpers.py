import numpy as np
import segno
from PIL import Image

from qr_overlay.watermark.fingerprint import derive
from qr_overlay.watermark.geometry import overlay_segments
from qr_overlay.watermark.verify import REFERENCE_BIT_COUNT


def overlay_coords(size):
    """Yield (col, row) for every overlay module, in walk order."""
    for seg in overlay_segments(size):
        (c0, r0), (c1, r1) = seg.start, seg.stop
        if c0 == c1:
            step = 1 if r0 <= r1 else -1
            for r in range(r0, r1 + step, step):
                yield c0, r
        else:
            step = 1 if c0 <= c1 else -1
            for c in range(c0, c1 + step, step):
                yield c, r0


def stamp_overlay(grid, payload):
    """Write the overlay for `payload` into `grid` in place."""
    bits = derive(payload, REFERENCE_BIT_COUNT)
    for (col, row), bit in zip(overlay_coords(grid.shape[0]), bits):
        grid[row, col] = 0 if bit else 255
    return grid


def noise_grid(size, seed=0):
    rng = np.random.default_rng(seed)
    return rng.choice(np.array([0, 255], dtype=np.uint8), size=(size, size))


def qr_image(text):
    """Render `text` at one pixel per module without a quiet zone."""
    matrix = np.array([list(row) for row in segno.make(text, micro=False).matrix], dtype=np.uint8)
    return Image.fromarray(np.where(matrix > 0, 0, 255).astype(np.uint8))
