"""Command-line interface for jpcontext."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import jpcontext
from jpcontext._utils import DEFAULT_MAX_BYTES, MINIMUM_DATA_THRESHOLD
from jpcontext.analysis import ContextResult
from jpcontext.detector import JapaneseContextDetector


def _format_confidence(result: ContextResult) -> str:
    if result.confidence is None:
        return "unknown"
    return f"{result.confidence:.3f}"


def _report(label: str, data: bytes, args: argparse.Namespace) -> None:
    detector = JapaneseContextDetector(
        encodings=args.encoding, min_relations=args.min_relations
    )
    detector.feed(data)
    for result in detector.close():
        confidence = _format_confidence(result)
        if args.minimal:
            print(f"{result.encoding} {confidence}")
        else:
            print(
                f"{label}: {result.encoding} with confidence {confidence}"
                f" ({result.relations} relations)"
            )


def main(argv: list[str] | None = None) -> None:
    """Run the ``jpcontext`` command-line tool.

    :param argv: Command-line arguments.  Defaults to ``sys.argv[1:]``.
    """
    parser = argparse.ArgumentParser(
        description="Score files as Shift_JIS / EUC-JP text by hiragana context."
    )
    parser.add_argument("files", nargs="*", help="Files to analyse")
    parser.add_argument(
        "-e",
        "--encoding",
        action="append",
        default=None,
        help="Encoding to score (repeatable; default: all supported)",
    )
    parser.add_argument(
        "--min-relations",
        type=int,
        default=MINIMUM_DATA_THRESHOLD,
        help="Hiragana pairs required before a confidence is reported",
    )
    parser.add_argument(
        "--minimal",
        action="store_true",
        help="Output only encoding and confidence pairs",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log debug output to stderr"
    )
    parser.add_argument(
        "--version", action="version", version=f"jpcontext {jpcontext.__version__}"
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(name)s: %(levelname)s: %(message)s"
        )

    try:
        JapaneseContextDetector(
            encodings=args.encoding, min_relations=args.min_relations
        )
    except ValueError as e:
        parser.error(str(e))

    failed = False
    if args.files:
        for filepath in args.files:
            try:
                with Path(filepath).open("rb") as f:
                    data = f.read(DEFAULT_MAX_BYTES)
            except OSError as e:
                print(f"jpcontext: {filepath}: {e}", file=sys.stderr)
                failed = True
                continue
            _report(filepath, data, args)
    else:
        _report("stdin", sys.stdin.buffer.read(DEFAULT_MAX_BYTES), args)

    if failed:
        sys.exit(1)


if __name__ == "__main__":
    main()
