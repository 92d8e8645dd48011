"""Console entry point for the checklist runner."""

from __future__ import annotations

import argparse
import sys

from tour.checklist import SECTIONS, run
from tour.config import TourConfig
from tour.console import setup_logging
from tour.errors import UnknownSectionError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tour",
        description="Run the language tour checklist.",
    )
    parser.add_argument(
        "sections",
        nargs="*",
        metavar="SECTION",
        help=f"sections to run (default: all of {', '.join(SECTIONS)})",
    )
    parser.add_argument("--log-level", help="overrides TOUR_LOG_LEVEL")
    parser.add_argument("--no-color", action="store_true", help="plain headers")
    parser.add_argument("--list", action="store_true", help="list sections and exit")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the checklist with CLI arguments; returns the exit status."""

    args = build_parser().parse_args(argv if argv is not None else sys.argv[1:])
    if args.list:
        print("\n".join(SECTIONS))
        return 0

    try:
        config = TourConfig.from_env(
            log_level=args.log_level,
            color_mode="never" if args.no_color else None,
        )
    except ValueError as exc:
        print(f"tour: {exc}", file=sys.stderr)
        return 2
    setup_logging(config.level)

    try:
        run(args.sections, color=config.use_color())
    except UnknownSectionError as exc:
        print(f"tour: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI passthrough only
    sys.exit(main())
