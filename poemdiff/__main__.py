"""
poemdiff Entry Point
====================

Command-line interface: loads two versions of a text, runs the word diff and
prints it to the terminal, as JSON, and/or as an HTML report.

Usage:
    python -m poemdiff <source_a> [source_b] [--html PATH] [--json] [--summary]
"""
import argparse
import json
import logging
import sys
from .engine import calculate_diff
from .input_controller import InputController
from .summary import DEFAULT_CONFIG, DiffSummary, classify_change
from .visualizer import HTMLVisualizer, TerminalRenderer

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="poemdiff: word-level diff for poem revisions")
    parser.add_argument("source_a", help="Old text file, or a single combined file")
    parser.add_argument("source_b", nargs="?", help="New text file (optional)")
    parser.add_argument("--html", metavar="PATH", help="Also write an HTML report to PATH")
    parser.add_argument("--json", action="store_true", help="Print segments and summary as JSON")
    parser.add_argument("--summary", action="store_true", help="Print word counts and change type")
    parser.add_argument("--no-color", action="store_true", help="Use {+ +} / [- -] markers instead of ANSI colours")
    parser.add_argument("--hide-additions", action="store_true", help="Do not highlight added words")
    parser.add_argument("--hide-deletions", action="store_true", help="Do not highlight deleted words")
    parser.add_argument("--major-ratio", type=float, default=DEFAULT_CONFIG["MAJOR_CHANGE_RATIO"],
                        help="Changed-word ratio from which a revision counts as major")
    parser.add_argument("--major-lines", type=int, default=DEFAULT_CONFIG["MAJOR_LINE_DELTA"],
                        help="Line-count change from which a revision counts as major")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv=None) -> int:
    """
    Main execution function.

    1. Parses command line arguments.
    2. Loads the old and new text.
    3. Runs the diff and classifies the change.
    4. Prints the results to stdout and optionally writes the HTML report.
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(name)s: %(message)s",
        stream=sys.stderr,
    )

    old_text, new_text = InputController().load(args.source_a, args.source_b)
    if not old_text and not new_text:
        logger.error("No input data found.")
        return 1

    config = {"MAJOR_CHANGE_RATIO": args.major_ratio, "MAJOR_LINE_DELTA": args.major_lines}
    try:
        segments = calculate_diff(old_text, new_text)
        change_type = classify_change(old_text, new_text, segments, config)
    except ValueError as e:
        logger.error("%s", e)
        return 2
    summary = DiffSummary.from_segments(segments)

    display = {"show_additions": not args.hide_additions, "show_deletions": not args.hide_deletions}

    if args.json:
        print(json.dumps({
            "segments": [s.to_dict() for s in segments],
            "summary": summary.to_dict(),
            "change_type": change_type.value,
        }, indent=2, ensure_ascii=False))
    else:
        color = not args.no_color and sys.stdout.isatty()
        print(TerminalRenderer().render(segments, color=color, **display))
        if args.summary:
            print(f"\n+{summary.words_added} -{summary.words_deleted} words ({change_type.value})")

    if args.html:
        path = HTMLVisualizer().generate(segments, args.html, **display)
        print(f"Report written to {path}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
