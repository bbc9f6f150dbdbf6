"""
FastAPI app for the QR overlay verification service.

Endpoints:
- GET /health
- POST /verify
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, File, Form, HTTPException, UploadFile
from fastapi.middleware.cors import CORSMiddleware

from .config import SETTINGS, Settings
from .errors import ImageLoadError
from .imaging import load_image
from .logging_config import setup_logging
from .pipeline import scan_image, verify_claim
from .schemas import HealthResponse, VerifyResponse

logger = logging.getLogger(__name__)

app = FastAPI(
    title="QR Overlay Verification Service",
    version="0.1.0",
    description="Detects tampered QR codes by checking the hash overlay around their finder patterns.",
)

# Permissive CORS for dev; tighten this later if needed.
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# Attach settings to app state so tests can swap them.
app.state.settings = SETTINGS


@app.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Simple health-check endpoint."""
    return HealthResponse(status="ok")


@app.post("/verify", response_model=VerifyResponse)
async def verify(
    image: UploadFile = File(...),
    payload: Optional[str] = Form(None),
) -> VerifyResponse:
    """
    Verify the overlay of an uploaded QR image.

    If `payload` is given it is used as the claimed payload and the image
    is not decoded. Images that fail verification (including ones with the
    wrong resolution or no readable QR code) still return 200 with
    `ok=false`.
    """
    settings: Settings = app.state.settings

    data = await image.read(settings.max_upload_bytes + 1)
    if len(data) > settings.max_upload_bytes:
        raise HTTPException(status_code=413, detail="image too large")

    try:
        img = load_image(data)
    except ImageLoadError as exc:
        logger.warning("Rejected upload %s: %s", image.filename, exc)
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    if payload is not None:
        result = verify_claim(img, payload, settings.white_level)
    else:
        result = scan_image(img, settings.decode_size, settings.white_level)

    return VerifyResponse.from_scan(result)


def run() -> None:
    """
    Convenience entrypoint if you want to run via:

        python -m qr_overlay.main

    or via the `qr-overlay-service` console_script defined in pyproject.toml.
    """
    import uvicorn

    setup_logging(SETTINGS.log_level)
    uvicorn.run(
        "qr_overlay.main:app",
        host="0.0.0.0",
        port=8080,
        reload=False,
    )


if __name__ == "__main__":
    run()
