"""Analyze a LaTeX manuscript and print its metrics report as JSON."""

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
from src.analytics import analyze, build_payload, derive_constraints, parse_limit
from src.ingestion import ManuscriptError, load_manuscript

logger = logging.getLogger(__name__)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--input",
        type=Path,
        required=True,
        help="Path to the .tex source to analyze.",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Optional path to write JSON output. Writes to stdout when omitted.",
    )
    parser.add_argument(
        "--word-limit",
        help="Optional word limit; adds a wordLimit constraint to the report.",
    )
    parser.add_argument(
        "--max-references",
        help="Optional reference cap; adds a maxReferences constraint to the report.",
    )
    parser.add_argument(
        "--max-bytes",
        type=int,
        default=settings.MAX_UPLOAD_BYTES,
        help=f"Reject inputs larger than this many bytes (default: {settings.MAX_UPLOAD_BYTES}).",
    )
    return parser.parse_args()


def _write_output(payload: dict[str, object], path: Path | None) -> None:
    serialized = json.dumps(payload, indent=2, ensure_ascii=False)
    if path is None:
        sys.stdout.write(serialized)
        sys.stdout.write("\n")
        return
    path.write_text(serialized, encoding="utf-8")


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=settings.LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")

    try:
        upload = load_manuscript(args.input, max_bytes=args.max_bytes)
    except ManuscriptError as exc:
        raise SystemExit(str(exc)) from None

    report = analyze(upload.content)
    constraints = derive_constraints(
        report,
        word_limit=parse_limit(args.word_limit),
        max_references=parse_limit(args.max_references),
    )
    logger.info("Analyzed %s (%d bytes)", upload.filename, upload.size_bytes)
    _write_output(build_payload(upload.filename, report, constraints), args.output)


if __name__ == "__main__":
    main()
