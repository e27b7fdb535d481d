"""Render the counted words of a LaTeX source as highlighted HTML or JSON fragments."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src import settings
from src.analytics import render_highlighted
from src.structuring.models import fragments_to_html


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--input",
        type=Path,
        help="Optional path to a UTF-8 .tex file. Reads stdin when omitted.",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Optional path to write the rendering. Writes to stdout when omitted.",
    )
    parser.add_argument(
        "--max-chars",
        type=int,
        default=settings.PREVIEW_MAX_CHARS,
        help=f"Characters of stripped text to render (default: {settings.PREVIEW_MAX_CHARS}).",
    )
    parser.add_argument(
        "--format",
        choices=("html", "json"),
        default="html",
        help="html joins fragments with <mark> tags; json lists each fragment (default: html).",
    )
    return parser.parse_args()


def _read_text(path: Path | None) -> str:
    if path is None:
        return sys.stdin.read()
    if not path.is_file():
        raise SystemExit(f"Input not found at {path}")
    return path.read_text(encoding="utf-8", errors="replace")


def main() -> None:
    args = _parse_args()
    logging.basicConfig(level=settings.LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")

    fragments = render_highlighted(_read_text(args.input), args.max_chars)
    if args.format == "json":
        rendered = json.dumps([fragment.to_dict() for fragment in fragments], ensure_ascii=False)
    else:
        rendered = fragments_to_html(fragments)
    if args.output is None:
        sys.stdout.write(rendered)
        sys.stdout.write("\n")
        return
    args.output.write_text(rendered, encoding="utf-8")


if __name__ == "__main__":
    main()
