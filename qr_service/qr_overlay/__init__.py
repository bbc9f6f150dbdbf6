"""
Top-level package for the QR overlay verification service.

The service exposes a FastAPI app (see `main.py`) with:

- GET /health
- POST /verify

and a `qr-overlay` command (see `cli.py`) for checking files locally.
"""
