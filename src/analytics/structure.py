from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Set

from src.structuring.markup import CITE_COMMAND_PATTERN

_FIGURE_RE = re.compile(r"\\begin\{figure\}")
_TABLE_RE = re.compile(r"\\begin\{table\}")
_EQUATION_ENV_RE = re.compile(r"\\begin\{equation\*?\}")
_DISPLAY_DOLLAR_RE = re.compile(r"\$\$.*?\$\$", re.S)
_DISPLAY_BRACKET_RE = re.compile(r"\\\[.*?\\\]", re.S)
_BIBITEM_RE = re.compile(r"\\bibitem(?![A-Za-z0-9_])")
_CITE_RE = re.compile(CITE_COMMAND_PATTERN)


@dataclass(frozen=True)
class StructureCounts:
    figures: int
    tables: int
    equations: int
    bib_items: int
    unique_cite_keys: int


def _count(pattern: re.Pattern[str], source: str) -> int:
    return sum(1 for _ in pattern.finditer(source))


def count_equations(source: str) -> int:
    """
    Sum equation environments, ``$$...$$`` blocks and ``\\[...\\]`` blocks.

    The three sources are added without deduplication.
    """

    return (
        _count(_EQUATION_ENV_RE, source)
        + _count(_DISPLAY_DOLLAR_RE, source)
        + _count(_DISPLAY_BRACKET_RE, source)
    )


def split_cite_keys(argument: str) -> Iterable[str]:
    for piece in argument.split(","):
        key = piece.strip()
        if key:
            yield key


def collect_cite_keys(source: str) -> Set[str]:
    keys: Set[str] = set()
    for match in _CITE_RE.finditer(source):
        keys.update(split_cite_keys(match.group(1)))
    return keys


def count_structure(source: str) -> StructureCounts:
    """Count floats, equations and references in comment-stripped source."""

    return StructureCounts(
        figures=_count(_FIGURE_RE, source),
        tables=_count(_TABLE_RE, source),
        equations=count_equations(source),
        bib_items=_count(_BIBITEM_RE, source),
        unique_cite_keys=len(collect_cite_keys(source)),
    )
