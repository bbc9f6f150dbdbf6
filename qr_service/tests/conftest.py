import io

import pytest
from PIL import Image

from tests.helpers import noise_grid, stamp_overlay


@pytest.fixture
def watermarked_grid():
    """21x21 grid carrying the overlay for b"TEST" over random modules."""
    return stamp_overlay(noise_grid(21), b"TEST")


@pytest.fixture
def watermarked_png(watermarked_grid):
    buf = io.BytesIO()
    Image.fromarray(watermarked_grid).save(buf, format="PNG")
    return buf.getvalue()
