"""Validation and decoding of uploaded manuscript sources."""

from .loader import (
    ManuscriptError,
    ManuscriptTooLargeError,
    MissingManuscriptError,
    UnsupportedExtensionError,
    load_manuscript,
    load_manuscript_bytes,
)
from .models import ManuscriptUpload

__all__ = [
    "ManuscriptError",
    "ManuscriptTooLargeError",
    "ManuscriptUpload",
    "MissingManuscriptError",
    "UnsupportedExtensionError",
    "load_manuscript",
    "load_manuscript_bytes",
]
