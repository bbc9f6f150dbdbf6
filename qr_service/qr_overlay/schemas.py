"""
Pydantic schemas used by the FastAPI app.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel

from .pipeline import ScanResult


class VerifyResponse(BaseModel):
    """
    Response payload for POST /verify.

    - ok: overall authenticity verdict
    - decoded: whether a payload was available (decoded or supplied)
    - payload: the payload the overlay was checked against
    - reason: why verification failed, if it did
    - width / height: image size in pixels, when verification ran
    - mismatched_bits: overlay bits that differ from the reference
    - latency_ms: overlay verification latency in milliseconds
    """

    ok: bool
    decoded: bool
    payload: Optional[str] = None
    reason: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    mismatched_bits: Optional[int] = None
    latency_ms: Optional[int] = None

    @classmethod
    def from_scan(cls, result: ScanResult) -> "VerifyResponse":
        report = result.report
        return cls(
            ok=result.ok,
            decoded=result.decoded,
            payload=result.payload,
            reason=result.reason,
            width=report.width if report else None,
            height=report.height if report else None,
            mismatched_bits=report.mismatched_bits if report else None,
            latency_ms=report.latency_ms if report else None,
        )


class HealthResponse(BaseModel):
    """Simple health check response."""

    status: str
