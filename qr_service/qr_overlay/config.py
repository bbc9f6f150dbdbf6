"""
Configuration helpers for the QR overlay service.

Settings come from environment variables and are read once at import.
Call `load_settings()` again (e.g. in tests) to pick up a changed
environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional


@dataclass(frozen=True)
class Settings:
    # Square size the decoder copy is resized to before QR decoding.
    decode_size: int = 1000
    # Grayscale intensity at or above which a module reads as white.
    white_level: int = 255
    max_upload_bytes: int = 10 * 1024 * 1024
    log_level: str = "INFO"


def _int_env(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    env = os.environ if environ is None else environ

    decode_size = _int_env(env, "QR_OVERLAY_DECODE_SIZE", Settings.decode_size)
    white_level = _int_env(env, "QR_OVERLAY_WHITE_LEVEL", Settings.white_level)
    max_upload_bytes = _int_env(env, "QR_OVERLAY_MAX_UPLOAD_BYTES", Settings.max_upload_bytes)
    log_level = env.get("QR_OVERLAY_LOG_LEVEL", Settings.log_level).upper()

    if decode_size <= 0:
        raise ValueError(f"QR_OVERLAY_DECODE_SIZE must be positive, got {decode_size}")
    if not 1 <= white_level <= 255:
        raise ValueError(f"QR_OVERLAY_WHITE_LEVEL must be within 1..255, got {white_level}")
    if max_upload_bytes <= 0:
        raise ValueError(f"QR_OVERLAY_MAX_UPLOAD_BYTES must be positive, got {max_upload_bytes}")

    return Settings(
        decode_size=decode_size,
        white_level=white_level,
        max_upload_bytes=max_upload_bytes,
        log_level=log_level,
    )


SETTINGS: Settings = load_settings()
