from __future__ import annotations

import logging
import re
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from src.analytics.structure import count_structure
from src.analytics.text_metrics import (
    count_characters,
    count_paragraphs,
    count_sentences,
    count_words,
)
from src.structuring.markup import strip_markup

logger = logging.getLogger(__name__)

_ABSTRACT_RE = re.compile(r"\\begin\{abstract\}(.*?)\\end\{abstract\}", re.S)


class ReferenceCounts(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    bib_items: int = Field(default=0, ge=0, alias="bibItems")
    unique_cite_keys: int = Field(default=0, ge=0, alias="uniqueCiteKeys")


class AbstractMetrics(BaseModel):
    model_config = ConfigDict(frozen=True)

    words: int = Field(default=0, ge=0)


class AnalysisReport(BaseModel):
    """
    Metrics derived from one manuscript source.

    Serialized field names (``references.bibItems``,
    ``references.uniqueCiteKeys``, ``abstract.words``) are consumed as-is by
    API clients; use :meth:`to_dict` rather than ``model_dump()`` directly.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    words: int = Field(default=0, ge=0)
    characters: int = Field(default=0, ge=0, description="Non-whitespace characters of the stripped text")
    sentences: int = Field(default=0, ge=0)
    paragraphs: int = Field(default=0, ge=0)
    figures: int = Field(default=0, ge=0)
    tables: int = Field(default=0, ge=0)
    equations: int = Field(default=0, ge=0)
    references: ReferenceCounts = Field(default_factory=ReferenceCounts)
    abstract: Optional[AbstractMetrics] = Field(
        default=None, description="Present only when the source has an abstract environment"
    )

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


def extract_abstract(raw: str) -> Optional[str]:
    match = _ABSTRACT_RE.search(raw)
    return match.group(1) if match else None


def analyze(raw: str) -> AnalysisReport:
    """Compute the full metrics report for a manuscript source string."""

    stripped = strip_markup(raw)
    structure = count_structure(stripped.uncommented)

    abstract_text = extract_abstract(raw)
    abstract = None
    if abstract_text is not None:
        abstract = AbstractMetrics(words=analyze(abstract_text).words)

    report = AnalysisReport(
        words=count_words(stripped.normalized),
        characters=count_characters(stripped.normalized),
        sentences=count_sentences(stripped.text),
        paragraphs=count_paragraphs(stripped.text),
        figures=structure.figures,
        tables=structure.tables,
        equations=structure.equations,
        references=ReferenceCounts(
            bib_items=structure.bib_items,
            unique_cite_keys=structure.unique_cite_keys,
        ),
        abstract=abstract,
    )
    logger.debug(
        "Analyzed %d input chars: %d words, %d sentences, %d paragraphs",
        len(raw),
        report.words,
        report.sentences,
        report.paragraphs,
    )
    return report
