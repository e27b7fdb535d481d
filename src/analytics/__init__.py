"""Manuscript metrics derived from LaTeX-like markup."""

from __future__ import annotations

from typing import List

from src.structuring.models import HighlightFragment, fragments_to_html
from .constraints import (
    ConstraintStatus,
    build_payload,
    derive_constraints,
    evaluate_constraint,
    parse_limit,
    reference_total,
)
from .highlight import DEFAULT_PREVIEW_MAX_CHARS, render_highlighted
from .report import AbstractMetrics, AnalysisReport, ReferenceCounts, analyze
from .structure import StructureCounts, collect_cite_keys, count_structure


def highlighted_html(raw: str, max_chars: int = DEFAULT_PREVIEW_MAX_CHARS) -> str:
    return fragments_to_html(render_highlighted(raw, max_chars))


def marked_tokens(raw: str, max_chars: int = DEFAULT_PREVIEW_MAX_CHARS) -> List[str]:
    return [fragment.text for fragment in render_highlighted(raw, max_chars) if fragment.is_marked]


__all__ = [
    "AbstractMetrics",
    "AnalysisReport",
    "ConstraintStatus",
    "DEFAULT_PREVIEW_MAX_CHARS",
    "HighlightFragment",
    "ReferenceCounts",
    "StructureCounts",
    "analyze",
    "build_payload",
    "collect_cite_keys",
    "count_structure",
    "derive_constraints",
    "evaluate_constraint",
    "highlighted_html",
    "marked_tokens",
    "parse_limit",
    "reference_total",
    "render_highlighted",
]
