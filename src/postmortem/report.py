"""
Human-readable output for the hours and issues commands.

The functions here build lists of lines; main.py prints them. Keeping the
text separate from print() makes the exact wording easy to test.
"""

from .clock import format_minutes
from .window import WindowSummary


def hours_lines(summary: WindowSummary, days: int, verbose: bool = False) -> list[str]:
    """
    Lines for the hours report.

    Verbose mode adds one line per day in the window, newest first:
        2026-10-16: 08:00
        2026-10-15: n/a          <- no report on disk for that day

    The last line is always the total.
    """
    lines = []

    if verbose:
        for day, daily in summary.days:
            if daily is None:
                lines.append(f"{day.isoformat()}: n/a")
                continue
            lines.append(f"{day.isoformat()}: {format_minutes(daily.minutes_worked)}")
            if daily.unpaired_stops:
                lines.append("  warning: Stop Time without Start Time ignored")
            if daily.unmatched_starts:
                lines.append("  warning: Start Time without Stop Time ignored")

    lines.append(f"Total Hours Worked (past {days} days): {format_minutes(summary.total_minutes)}")
    return lines


def issues_lines(issues: list[str], days: int) -> list[str]:
    """Header plus one tab-indented "#<id>" line per issue."""
    lines = [f"Issues Worked On (past {days} days):"]
    lines.extend(f"\t#{issue_id}" for issue_id in issues)
    return lines
