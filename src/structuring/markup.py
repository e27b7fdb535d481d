from __future__ import annotations

import re
from typing import Tuple

from src.structuring.models import StrippedText

# Environments removed wholesale, content included. Order is the pass order.
EXCLUDED_ENVIRONMENTS: Tuple[str, ...] = (
    "figure",
    "table",
    "tabular",
    "tikzpicture",
    "lstlisting",
    "verbatim",
    "minted",
    "equation",
    "equation*",
    "align",
    "align*",
    "gather",
    "gather*",
    "displaymath",
    "math",
    "eqnarray",
)

# Metadata commands whose argument is a single-line brace group.
BRACED_METADATA_COMMANDS: Tuple[str, ...] = ("bibliography", "bibliographystyle")
# Same, but an optional [...] may precede the brace group.
OPTION_METADATA_COMMANDS: Tuple[str, ...] = ("documentclass", "usepackage")
# Argument may span lines; matched up to the first closing brace.
SPANNING_METADATA_COMMANDS: Tuple[str, ...] = (
    "title",
    "author",
    "date",
    "affil",
    "hypersetup",
    "graphicspath",
)

REFERENCE_COMMANDS: Tuple[str, ...] = ("label", "ref", "pageref", "eqref", "autoref")

_LINE_BREAK_RE = re.compile(r"\r?\n")

_DISPLAY_DOLLAR_RE = re.compile(r"\$\$.*?\$\$", re.S)
_INLINE_DOLLAR_RE = re.compile(r"\$[^$]*\$")
_DISPLAY_BRACKET_RE = re.compile(r"\\\[.*?\\\]", re.S)
_INLINE_PAREN_RE = re.compile(r"\\\(.*?\\\)", re.S)

_METADATA_PATTERNS: Tuple[re.Pattern[str], ...] = (
    *(
        re.compile(rf"\\{name}\s*(?:\[[^\]]*\])?\s*\{{[^}}]*\}}")
        for name in OPTION_METADATA_COMMANDS
    ),
    *(re.compile(rf"\\{name}\s*\{{[^}}]*\}}") for name in BRACED_METADATA_COMMANDS),
    *(re.compile(rf"\\{name}\s*\{{.*?\}}", re.S) for name in SPANNING_METADATA_COMMANDS),
)
_NEWCOMMAND_RE = re.compile(
    r"\\(?:re)?newcommand\*?\s*\{?\\[^}]+\}?\s*(?:\[[^\]]*\])?\s*\{.*?\}", re.S
)
_PROVIDECOMMAND_RE = re.compile(
    r"\\providecommand\*?\s*\{?\\[^}]+\}?\s*(?:\[[^\]]*\])?\s*\{.*?\}", re.S
)
_DECLARE_RE = re.compile(
    r"\\Declare[a-zA-Z@]*\*?(?:\[[^\]]*\])?\s*\{[^}]*\}(?:\s*\{.*?\})*", re.S
)

_REFERENCE_RE = re.compile(
    r"\\(?:" + "|".join(REFERENCE_COMMANDS) + r")\*?\s*\{[^}]*\}"
)
CITE_COMMAND_PATTERN = r"\\cite[A-Za-z0-9_]*\*?\s*(?:\[[^\]]*\])?\s*\{([^}]*)\}"
_CITE_RE = re.compile(CITE_COMMAND_PATTERN)

_ENVIRONMENT_MARKER_RE = re.compile(r"\\(?:begin|end)\s*\{[^}]*\}")
_SINGLE_ARGUMENT_RE = re.compile(r"\\[a-zA-Z]+\*?\s*(?:\[[^\]]*\])?\s*\{([^{}]*)\}")
_COMMAND_TOKEN_RE = re.compile(r"\\[a-zA-Z@]+\*?(?:\[[^\]]*\])?")

_INLINE_SPACE_RE = re.compile(r"[\t\f\v]+")
_WHITESPACE_RUN_RE = re.compile(r"\s{2,}")


def _strip_line_comment(line: str) -> str:
    for index, char in enumerate(line):
        if char == "%" and (index == 0 or line[index - 1] != "\\"):
            return line[:index]
    return line


def strip_comments(text: str) -> str:
    r"""Drop everything from the first unescaped ``%`` to the end of each line.

    Only the single preceding character is inspected, so ``\\%`` still counts
    as an escaped percent sign.
    """

    return "\n".join(_strip_line_comment(line) for line in _LINE_BREAK_RE.split(text))


def _environment_pattern(name: str) -> re.Pattern[str]:
    escaped = re.escape(name)
    return re.compile(rf"\\begin\{{{escaped}\}}.*?\\end\{{{escaped}\}}", re.S)


_ENVIRONMENT_PATTERNS: Tuple[re.Pattern[str], ...] = tuple(
    _environment_pattern(name) for name in EXCLUDED_ENVIRONMENTS
)


def remove_environments(text: str) -> str:
    for pattern in _ENVIRONMENT_PATTERNS:
        text = pattern.sub(" ", text)
    return text


def remove_math(text: str) -> str:
    # $$ must go before $, otherwise $$x$$ splits into two empty inline spans.
    text = _DISPLAY_DOLLAR_RE.sub(" ", text)
    text = _INLINE_DOLLAR_RE.sub(" ", text)
    text = _DISPLAY_BRACKET_RE.sub(" ", text)
    return _INLINE_PAREN_RE.sub(" ", text)


def remove_preamble_commands(text: str) -> str:
    """Delete document metadata commands and macro definitions with their arguments."""

    for pattern in _METADATA_PATTERNS:
        text = pattern.sub(" ", text)
    text = _NEWCOMMAND_RE.sub(" ", text)
    text = _PROVIDECOMMAND_RE.sub(" ", text)
    return _DECLARE_RE.sub(" ", text)


def remove_references(text: str) -> str:
    text = _REFERENCE_RE.sub(" ", text)
    return _CITE_RE.sub(" ", text)


def remove_environment_markers(text: str) -> str:
    """Delete ``\\begin{name}`` and ``\\end{name}`` of environments whose body is kept."""

    return _ENVIRONMENT_MARKER_RE.sub(" ", text)


def keep_argument_text(text: str) -> str:
    """Replace ``\\cmd[opt]{arg}`` with ``arg`` when ``arg`` holds no braces."""

    return _SINGLE_ARGUMENT_RE.sub(r"\1", text)


def remove_remaining_commands(text: str) -> str:
    return _COMMAND_TOKEN_RE.sub(" ", text)


def normalize_whitespace(text: str) -> str:
    text = _INLINE_SPACE_RE.sub(" ", text)
    return _WHITESPACE_RUN_RE.sub(" ", text).strip()


def strip_markup(raw: str) -> StrippedText:
    """
    Run every deletion pass over ``raw`` in pipeline order.

    The returned object keeps the comment-stripped source (for structural
    counters), the stripped text with its line structure intact (for
    paragraphs and previews) and its whitespace-normalized form.
    """

    uncommented = strip_comments(raw)
    content = remove_environments(uncommented)
    content = remove_math(content)
    # A second sweep catches definitions uncovered by the first one.
    content = remove_preamble_commands(content)
    content = remove_preamble_commands(content)
    content = remove_references(content)
    content = remove_environment_markers(content)
    content = keep_argument_text(content)
    content = remove_remaining_commands(content)

    return StrippedText(
        uncommented=uncommented,
        text=content,
        normalized=normalize_whitespace(content),
    )
