"""
Reference watermark bits derived from the decoded QR payload.

The payload is hashed with SHA-256 and the digest is read as a bit string,
most significant bit of each byte first. Only a prefix of that string is
embedded in the image.
"""

from __future__ import annotations

import hashlib
from typing import List, Union

DIGEST_BITS = 256

Payload = Union[str, bytes]


def payload_bytes(payload: Payload) -> bytes:
    if isinstance(payload, str):
        return payload.encode("utf-8")
    return bytes(payload)


def digest_bits(payload: Payload) -> List[int]:
    digest = hashlib.sha256(payload_bytes(payload)).digest()
    return [(byte >> shift) & 1 for byte in digest for shift in range(7, -1, -1)]


def derive(payload: Payload, bit_count: int) -> List[int]:
    """Return the first `bit_count` bits of SHA-256(payload)."""
    if not 0 <= bit_count <= DIGEST_BITS:
        raise ValueError(f"bit_count must be within 0..{DIGEST_BITS}, got {bit_count}")
    return digest_bits(payload)[:bit_count]
