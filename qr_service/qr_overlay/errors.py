"""Exceptions raised by the QR overlay service."""


class QrOverlayError(Exception):
    """Base class for service errors."""


class ImageLoadError(QrOverlayError):
    """The input could not be read as an image."""
