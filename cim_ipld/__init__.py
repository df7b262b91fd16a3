"""Verified wrappers and magic-byte detection for common document, image, audio and video formats."""

__version__ = "0.3.0"
__all__ = ["content_types"]