from __future__ import annotations

import logging
import re
from typing import List

from src.structuring.markup import strip_markup
from src.structuring.models import (
    FRAGMENT_MARK,
    FRAGMENT_TEXT,
    FRAGMENT_WHITESPACE,
    HighlightFragment,
)
from src.utils.tokens import escape_markup, is_word

logger = logging.getLogger(__name__)

DEFAULT_PREVIEW_MAX_CHARS = 40_000

_RUN_RE = re.compile(r"(\s+)")


def render_highlighted(
    raw: str, max_chars: int = DEFAULT_PREVIEW_MAX_CHARS
) -> List[HighlightFragment]:
    """
    Render the counted text of ``raw`` as whitespace, marked and plain fragments.

    The stripped text keeps its original line structure and is cut to
    ``max_chars`` before tokenizing. A non-whitespace run is marked when it
    would count as a word; the whole run is marked, punctuation included.
    """

    stripped = strip_markup(raw).text
    truncated = stripped[: max(max_chars, 0)]
    if len(truncated) < len(stripped):
        logger.debug("Preview truncated from %d to %d chars", len(stripped), len(truncated))

    fragments: List[HighlightFragment] = []
    for part in _RUN_RE.split(truncated):
        if not part:
            continue
        if part.isspace():
            fragments.append(HighlightFragment(FRAGMENT_WHITESPACE, part))
        elif is_word(part):
            fragments.append(HighlightFragment(FRAGMENT_MARK, escape_markup(part)))
        else:
            fragments.append(HighlightFragment(FRAGMENT_TEXT, escape_markup(part)))
    return fragments
