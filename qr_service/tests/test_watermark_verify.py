import numpy as np
import pytest
from PIL import Image

from qr_overlay.watermark.verify import (
    OVERLAY_MISMATCH,
    RESOLUTION_INCORRECT,
    inspect_overlay,
    verify_overlay,
)

from tests.helpers import noise_grid, overlay_coords, stamp_overlay


def test_watermarked_grid_verifies(watermarked_grid):
    assert verify_overlay(watermarked_grid, "TEST") is True
    assert verify_overlay(watermarked_grid, b"TEST") is True


def test_other_payload_is_rejected(watermarked_grid):
    assert verify_overlay(watermarked_grid, "TEST2") is False


@pytest.mark.parametrize("index", range(45))
def test_any_single_flipped_pixel_fails(watermarked_grid, index):
    col, row = list(overlay_coords(21))[index]
    watermarked_grid[row, col] = 255 - watermarked_grid[row, col]

    report = inspect_overlay(watermarked_grid, "TEST")

    assert report.ok is False
    assert report.reason == OVERLAY_MISMATCH
    assert report.mismatched_bits == 1


def test_pixels_off_the_overlay_path_are_ignored(watermarked_grid):
    on_path = set(overlay_coords(21))
    for row in range(21):
        for col in range(21):
            if (col, row) not in on_path:
                watermarked_grid[row, col] = 128

    assert verify_overlay(watermarked_grid, "TEST") is True


def test_pil_image_in_other_modes_verifies(watermarked_grid):
    rgb = Image.fromarray(watermarked_grid).convert("RGB")
    assert verify_overlay(rgb, "TEST") is True
    assert verify_overlay(np.asarray(rgb), "TEST") is True


def test_larger_symbol_verifies():
    grid = stamp_overlay(noise_grid(37, seed=3), "https://example.com/pay?id=42")
    assert verify_overlay(grid, "https://example.com/pay?id=42") is True


@pytest.mark.parametrize("shape", [(21, 20), (20, 21), (20, 20)])
def test_bad_resolution_is_rejected(shape):
    grid = np.full(shape, 255, dtype=np.uint8)

    report = inspect_overlay(grid, "TEST")

    assert report.ok is False
    assert report.reason == RESOLUTION_INCORRECT
    assert report.observed_bits == []
    assert report.reference_bits == []
    assert report.latency_ms >= 0


def test_report_carries_bits(watermarked_grid):
    report = inspect_overlay(watermarked_grid, "TEST")
    assert report.ok is True
    assert report.reason is None
    assert report.width == report.height == 21
    assert report.observed_bits == report.reference_bits
    assert len(report.observed_bits) == 45


def test_white_level_threshold():
    grid = stamp_overlay(noise_grid(21), "TEST")
    # Slightly grey "white" modules read as black at the default level.
    grid[grid == 255] = 250

    assert verify_overlay(grid, "TEST") is False
    assert verify_overlay(grid, "TEST", white_level=240) is True
