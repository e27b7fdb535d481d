from __future__ import annotations

import math
from typing import Any, Dict, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from src.analytics.report import AnalysisReport

Number = Union[int, float]

WORD_LIMIT_KEY = "wordLimit"
MAX_REFERENCES_KEY = "maxReferences"


class ConstraintStatus(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    limit: Number
    within_limit: bool = Field(alias="withinLimit")
    over_by: Number = Field(alias="overBy")
    remaining: Number


def parse_limit(value: Optional[str]) -> Optional[Number]:
    """Parse an optional numeric query value; blanks and non-numbers yield ``None``."""

    if value is None:
        return None
    cleaned = value.strip()
    if not cleaned or "_" in cleaned:
        return None
    try:
        return int(cleaned)
    except ValueError:
        pass
    try:
        parsed = float(cleaned)
    except ValueError:
        return None
    if not math.isfinite(parsed):
        return None
    return int(parsed) if parsed.is_integer() else parsed


def evaluate_constraint(count: int, limit: Number) -> ConstraintStatus:
    return ConstraintStatus(
        limit=limit,
        within_limit=count <= limit,
        over_by=max(0, count - limit),
        remaining=max(0, limit - count),
    )


def reference_total(report: AnalysisReport) -> int:
    """Bibliography size as the larger of ``\\bibitem`` entries and distinct cite keys."""
    return max(report.references.bib_items, report.references.unique_cite_keys)


def derive_constraints(
    report: AnalysisReport,
    *,
    word_limit: Optional[Number] = None,
    max_references: Optional[Number] = None,
) -> Dict[str, ConstraintStatus]:
    constraints: Dict[str, ConstraintStatus] = {}
    if word_limit is not None:
        constraints[WORD_LIMIT_KEY] = evaluate_constraint(report.words, word_limit)
    if max_references is not None:
        constraints[MAX_REFERENCES_KEY] = evaluate_constraint(
            reference_total(report), max_references
        )
    return constraints


def build_payload(
    filename: str,
    report: AnalysisReport,
    constraints: Mapping[str, ConstraintStatus],
) -> Dict[str, Any]:
    """Assemble the JSON body returned for an analyzed upload."""

    return {
        "filename": filename,
        **report.to_dict(),
        "constraints": {
            key: status.model_dump(by_alias=True) for key, status in constraints.items()
        },
    }
