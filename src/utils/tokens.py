from __future__ import annotations

import html
import re

# [^\W_] is a Unicode letter or digit; edges outside that class are trimmed.
_EDGE_PUNCTUATION_RE = re.compile(r"^[\W_]+|[\W_]+$")


def word_core(token: str) -> str:
    """
    Trim leading and trailing characters that are neither letters nor digits.

    ``"(Hello),"`` becomes ``"Hello"``; a token made only of punctuation
    becomes the empty string and is not a word.
    """

    return _EDGE_PUNCTUATION_RE.sub("", token)


def is_word(token: str) -> bool:
    return bool(word_core(token))


def escape_markup(text: str) -> str:
    """Escape ``&``, ``<`` and ``>``; quotes are left alone."""
    return html.escape(text, quote=False)
