from __future__ import annotations

import re

from src.utils.tokens import is_word

_SENTENCE_BREAK_RE = re.compile(r"[.!?]+\s+")
_PARAGRAPH_BREAK_RE = re.compile(r"\n\s*\n")
# U+FEFF counts as whitespace, so a byte-order mark is not a character.
_WHITESPACE_RE = re.compile(r"[\s\ufeff]+")


def count_words(text: str) -> int:
    return sum(1 for token in text.split() if is_word(token))


def count_sentences(text: str) -> int:
    """Count pieces between runs of ``.``, ``!`` or ``?`` followed by whitespace.

    This is a delimiter split, not sentence detection: "e.g. this" yields two.
    """

    return sum(1 for piece in _SENTENCE_BREAK_RE.split(text) if piece.strip())


def count_paragraphs(text: str) -> int:
    """Count blank-line separated blocks; ``text`` must not be whitespace-normalized."""

    return sum(1 for block in _PARAGRAPH_BREAK_RE.split(text) if block.strip())


def count_characters(normalized: str) -> int:
    return len(_WHITESPACE_RE.sub("", normalized))
