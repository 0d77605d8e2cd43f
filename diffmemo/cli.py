"""Command line entry point: diff a recalled text file against a reference."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from .alignment import compute_lcs
from .config import load_settings
from .evaluation import build_report, recall_metrics
from .render import generate_diff
from .tokens import tokenize

DEFAULT_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
LOGGING_FORMAT = "%(asctime)s:%(levelname)s:%(name)s:%(message)s"

logger = logging.getLogger(__name__)


def _read(parser: argparse.ArgumentParser, path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        parser.error(f"cannot read file '{path}': {e}")
    logger.info("Read %d characters from %s", len(text), path)
    return text


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="diffmemo",
        description="Highlight extra and missing words in a recalled text "
        "compared to its reference (ignoring case and edge punctuation).",
        epilog="Example: %(prog)s reference.txt answer.txt --format html",
    )
    parser.add_argument("reference", metavar="REFERENCE", help="reference text file")
    parser.add_argument(
        "answer", metavar="ANSWER", help="recalled text file ('-' for stdin)"
    )
    parser.add_argument(
        "--format",
        choices=("summary", "html", "json"),
        default="summary",
        help="output format (default: %(default)s)",
    )
    parser.add_argument("-v", action="store_true", default=False, help="Print extra info")
    parser.add_argument(
        "-vv", action="store_true", default=False, help="Print (more) extra info"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings()
    except RuntimeError as e:
        parser.error(str(e))

    if args.vv:
        level = logging.DEBUG
    elif args.v:
        level = logging.INFO
    else:
        level = settings.level
    logging.basicConfig(format=LOGGING_FORMAT, datefmt=DEFAULT_TIME_FORMAT, level=level)

    if args.reference == "-" and args.answer == "-":
        parser.error("only one of REFERENCE and ANSWER can be read from stdin")

    target_text = _read(parser, args.reference)
    answer_text = _read(parser, args.answer)

    target = tokenize(target_text)
    answer = tokenize(answer_text)
    matches = compute_lcs(target, answer)
    diff = generate_diff(target, answer, answer_text, matches, settings)
    logger.debug("aligned %d of %d reference words", len(matches), len(target))

    if args.format == "html":
        print(diff.html)
    elif args.format == "json":
        report = build_report(
            target_text, answer_text, target, answer, matches, verbose=True
        )
        report["html"] = diff.html
        print(json.dumps(report, indent=2, ensure_ascii=False))
    else:
        metrics = recall_metrics(target, answer, matches)
        print(f"extra: {diff.extra_count}")
        print(f"missing: {diff.missing_count}")
        print(
            f"precision: {metrics['precision']:.2f}  "
            f"recall: {metrics['recall']:.2f}  f1: {metrics['f1']:.2f}"
        )

    return 0 if diff.is_exact else 1


if __name__ == "__main__":
    sys.exit(main())
