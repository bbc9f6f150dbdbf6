"""
Command-line entry point: check a single QR image file.

    qr-overlay path/to/qr.png
    qr-overlay path/to/qr.png --payload "https://example.com" --json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from .config import SETTINGS
from .errors import ImageLoadError
from .imaging import load_image
from .logging_config import setup_logging
from .pipeline import ScanResult, process_qr_code, verify_claim
from .schemas import VerifyResponse

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_LOAD_ERROR = 2


def _positive_int(raw: str) -> int:
    value = int(raw)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {value}")
    return value


def _white_level(raw: str) -> int:
    value = int(raw)
    if not 1 <= value <= 255:
        raise argparse.ArgumentTypeError(f"must be within 1..255, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="qr-overlay",
        description="Verify the hash overlay around a QR code's finder patterns.",
    )
    parser.add_argument("image", help="Path to the original, unscaled QR image")
    parser.add_argument("--payload", help="Claimed payload; skips QR decoding")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    parser.add_argument("--white-level", type=_white_level, default=SETTINGS.white_level)
    parser.add_argument("--decode-size", type=_positive_int, default=SETTINGS.decode_size)
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def _print_human(result: ScanResult) -> None:
    if not result.decoded:
        print("Failed to decode the QR code.")
        return
    print(f"Decoded message: {result.payload}")
    print(f"Verification: {'valid' if result.ok else 'invalid'}")
    if result.reason:
        print(f"Reason: {result.reason}")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        if args.payload is not None:
            result = verify_claim(load_image(args.image), args.payload, args.white_level)
        else:
            result = process_qr_code(args.image, args.decode_size, args.white_level)
    except ImageLoadError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_LOAD_ERROR

    if args.json:
        print(json.dumps(VerifyResponse.from_scan(result).model_dump(), indent=2))
    else:
        _print_human(result)

    return EXIT_VALID if result.ok else EXIT_INVALID


if __name__ == "__main__":
    sys.exit(main())
