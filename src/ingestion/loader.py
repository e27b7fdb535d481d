from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional

from src import settings

from .models import ManuscriptUpload

logger = logging.getLogger(__name__)

DEFAULT_FILENAME = "uploaded.tex"


class ManuscriptError(ValueError):
    """Base class for uploads rejected before analysis."""


class MissingManuscriptError(ManuscriptError):
    pass


class UnsupportedExtensionError(ManuscriptError):
    pass


class ManuscriptTooLargeError(ManuscriptError):
    pass


def _check_extension(filename: str, allowed_extensions: Iterable[str]) -> None:
    allowed = tuple(ext.lower() for ext in allowed_extensions)
    if not filename.lower().endswith(allowed):
        logger.warning("Rejected %s: extension not in %s", filename, allowed)
        listed = ", ".join(allowed)
        raise UnsupportedExtensionError(f"Only {listed} files are supported")


def _check_size(filename: str, size_bytes: int, max_bytes: int) -> None:
    if size_bytes > max_bytes:
        logger.warning("Rejected %s: %d bytes exceeds limit of %d", filename, size_bytes, max_bytes)
        raise ManuscriptTooLargeError(
            f"{filename} is {size_bytes} bytes; the limit is {max_bytes} bytes"
        )


def load_manuscript_bytes(
    filename: Optional[str],
    data: Optional[bytes],
    *,
    max_bytes: Optional[int] = None,
    allowed_extensions: Optional[Iterable[str]] = None,
) -> ManuscriptUpload:
    """
    Validate an in-memory upload and decode it as UTF-8.

    Undecodable bytes are replaced rather than rejected. A missing filename
    falls back to ``uploaded.tex``.
    """

    if data is None:
        raise MissingManuscriptError("Missing file")

    name = filename or DEFAULT_FILENAME
    _check_extension(name, allowed_extensions or settings.ALLOWED_EXTENSIONS)
    limit = settings.MAX_UPLOAD_BYTES if max_bytes is None else max_bytes
    _check_size(name, len(data), limit)

    return ManuscriptUpload(
        filename=name,
        content=data.decode("utf-8", errors="replace"),
        size_bytes=len(data),
    )


def load_manuscript(
    path: Path | str,
    *,
    max_bytes: Optional[int] = None,
    allowed_extensions: Optional[Iterable[str]] = None,
) -> ManuscriptUpload:
    source = Path(path)
    if not source.is_file():
        raise MissingManuscriptError(f"Manuscript not found at {source}")

    limit = settings.MAX_UPLOAD_BYTES if max_bytes is None else max_bytes
    # Reject before reading the file.
    _check_extension(source.name, allowed_extensions or settings.ALLOWED_EXTENSIONS)
    _check_size(source.name, source.stat().st_size, limit)

    return load_manuscript_bytes(
        source.name,
        source.read_bytes(),
        max_bytes=limit,
        allowed_extensions=allowed_extensions,
    )
