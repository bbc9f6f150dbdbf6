"""
Separator-overlay watermark verification.

- `bits`: pixel sampling and path walking
- `fingerprint`: reference bits from the payload digest
- `geometry`: the fixed overlay path around the finder patterns
- `verify`: the authenticity check tying them together
"""

from .verify import OverlayReport, inspect_overlay, verify_overlay

__all__ = ["OverlayReport", "inspect_overlay", "verify_overlay"]
