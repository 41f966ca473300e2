"""CLI entrypoint for commentfold."""

from __future__ import annotations

import argparse
import sys

from .config import OutputMode, RunConfig
from .errors import ConfigError
from .logging import configure_logging
from .processor import CommentProcessor

_EXAMPLES = """\
examples:
  commentfold                        # process all .go files in the current directory
  commentfold file.go                # process a specific file
  commentfold ./...                  # process all .go files recursively
  commentfold -output=print file.go  # print the modified file to stdout
  commentfold -output=diff *.go      # show a diff for all .go files
"""


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="commentfold",
        description="Convert in-function comments of Go sources to lowercase.",
        epilog=_EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    parser.add_argument(
        "-output",
        "--output",
        dest="output",
        default=OutputMode.INPLACE.value,
        choices=[mode.value for mode in OutputMode],
        help="Output mode: inplace, print, diff (default: inplace).",
    )
    parser.add_argument(
        "-dry-run",
        "--dry-run",
        dest="dry_run",
        action="store_true",
        help="Don't modify files, just show what would be changed.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "-help",
        "-h",
        "--help",
        action="help",
        default=argparse.SUPPRESS,
        help="Show usage information.",
    )
    parser.add_argument(
        "patterns",
        nargs="*",
        metavar="file/pattern",
        help="Files, globs, directories or dir/... for recursion (defaults to '.').",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for commentfold."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose))

    try:
        config = RunConfig.from_options(args.output, dry_run=args.dry_run, verbose=args.verbose)
    except ConfigError as exc:  # pragma: no cover - argparse enforces choices
        parser.exit(2, f"{exc}\n")

    CommentProcessor(config).run(args.patterns)


if __name__ == "__main__":
    main(sys.argv[1:])
