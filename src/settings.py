"""Runtime settings for the command-line and upload boundary.

Values come from the environment, optionally seeded from a ``.env`` file.
The analyzer itself reads none of these; markup rules are code constants
in ``src.structuring.markup``.
"""

from __future__ import annotations

import os
from typing import Tuple

from dotenv import load_dotenv

# Does not override variables that are already set.
load_dotenv()


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _extensions_env(name: str, default: Tuple[str, ...]) -> Tuple[str, ...]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    extensions = []
    for part in raw.split(","):
        cleaned = part.strip().lower()
        if not cleaned:
            continue
        extensions.append(cleaned if cleaned.startswith(".") else f".{cleaned}")
    return tuple(extensions) or default


PREVIEW_MAX_CHARS: int = _int_env("MANUSCRIPT_PREVIEW_MAX_CHARS", 40_000)
MAX_UPLOAD_BYTES: int = _int_env("MANUSCRIPT_MAX_UPLOAD_BYTES", 20 * 1024 * 1024)
ALLOWED_EXTENSIONS: Tuple[str, ...] = _extensions_env("MANUSCRIPT_ALLOWED_EXTENSIONS", (".tex",))
LOG_LEVEL: str = os.getenv("MANUSCRIPT_LOG_LEVEL", "WARNING").upper()
