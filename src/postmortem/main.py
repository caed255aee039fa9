"""
Main entry point for postmortem.

Two commands read the daily reports over a window of days:
- hours:  total time worked (start/stop pairs minus breaks)
- issues: every "#<number>" issue referenced, first-seen order

Run with: python -m postmortem hours --days 7
"""

import argparse
import sys
from datetime import date
from pathlib import Path

from . import config
from .journal import make_reader
from .report import hours_lines, issues_lines
from .window import WindowSummary, compute_hours, compute_issues, summarize_window


def _parse_date(value: str) -> date:
    """argparse type for --date: strict YYYY-MM-DD."""
    try:
        return date.fromisoformat(value)
    except ValueError:
        # ArgumentTypeError makes argparse print a usage error and exit 2
        raise argparse.ArgumentTypeError(f"not a YYYY-MM-DD date: {value!r}")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Syntax notes:
    - add_subparsers() gives git-style commands ("hours", "issues")
    - default=None on --days / --include-today means "not given"; main()
      then falls back to the configured value
    - argv=None makes argparse read sys.argv[1:]; tests pass a list instead

    Returns:
        Namespace object with parsed arguments as attributes.
    """
    parser = argparse.ArgumentParser(
        prog="postmortem",
        description="Summarize hours worked and issues touched from daily postmortem reports.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a YAML config file (default: $POSTMORTEM_CONFIG or config/config.yaml).",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # Options shared by both commands
    window = argparse.ArgumentParser(add_help=False)
    window.add_argument(
        "--days",
        type=int,
        default=None,
        help="Number of days to look back (default from config: window.days).",
    )
    window.add_argument(
        "--include-today",
        action="store_true",
        default=None,
        help="Count today's report as part of the window.",
    )
    window.add_argument(
        "--date",
        type=_parse_date,
        default=None,
        help="Anchor date in YYYY-MM-DD form (default: today).",
    )

    hours = subparsers.add_parser("hours", parents=[window], help="Total hours worked.")
    hours.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show a line per day, with n/a for days without a report.",
    )

    subparsers.add_parser("issues", parents=[window], help="Issues worked on.")

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point.

    Returns:
        Exit code (0 for success). Usage errors exit 2 from inside argparse.
    """
    args = parse_args(argv)

    if args.config is not None:
        config.use_config(args.config)

    days = args.days if args.days is not None else int(config.get("window.days", 7))
    include_today = (
        args.include_today if args.include_today is not None else bool(config.get("window.include_today", False))
    )
    # The anchor is resolved once here and passed down; nothing below reads the clock
    anchor = args.date if args.date is not None else date.today()

    read_report = make_reader(config.get_reports_path())

    if args.command == "hours":
        if args.verbose:
            summary = summarize_window(days, include_today, anchor, read_report)
        else:
            # The plain report only needs the total, not the per-day breakdown
            summary = WindowSummary(total_minutes=compute_hours(days, include_today, anchor, read_report))

        for line in hours_lines(summary, days, verbose=args.verbose):
            print(line)
        return 0

    if args.command == "issues":
        issues = compute_issues(days, include_today, anchor, read_report)
        for line in issues_lines(issues, days):
            print(line)
        return 0

    # Unreachable: argparse rejects unknown commands
    return 2


if __name__ == "__main__":
    sys.exit(main())
