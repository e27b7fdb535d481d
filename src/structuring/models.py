from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List

FRAGMENT_WHITESPACE = "whitespace"
FRAGMENT_MARK = "mark"
FRAGMENT_TEXT = "text"


@dataclass(frozen=True)
class StrippedText:
    uncommented: str
    text: str
    normalized: str


@dataclass(frozen=True)
class HighlightFragment:
    """One piece of a preview rendering; ``text`` is already markup-escaped."""

    kind: str
    text: str

    @property
    def is_marked(self) -> bool:
        return self.kind == FRAGMENT_MARK

    def to_dict(self) -> Dict[str, str]:
        return {"kind": self.kind, "text": self.text}


def fragments_to_html(fragments: Iterable[HighlightFragment]) -> str:
    """Join fragments into the HTML string the editor preview displays."""

    parts: List[str] = []
    for fragment in fragments:
        if fragment.is_marked:
            parts.append(f"<mark>{fragment.text}</mark>")
        else:
            parts.append(fragment.text)
    return "".join(parts)
