"""
Fold daily reports over a window of calendar days.

The window is counted backwards from an anchor date (normally today):

    include_today=True,  days=7  ->  anchor-0 ... anchor-6
    include_today=False, days=7  ->  anchor-1 ... anchor-7

Days are visited most recent first. That order does not change the minute
total, but it decides the first-seen order of the issue list.

The anchor is always passed in explicitly; nothing here reads the clock.
"""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from datetime import date, timedelta

from .daily import DailySummary, OrderedIssueSet, daily_issues, daily_minutes, summarize_day

# Anything that maps a calendar date to that day's report text, or None
# when there is no report. journal.make_reader() builds one from a folder;
# a plain dict's .get works too.
ReportReader = Callable[[date], str | None]


@dataclass
class WindowSummary:
    """Running totals for a window. Only the aggregator mutates it."""

    total_minutes: int = 0
    issues: OrderedIssueSet = field(default_factory=OrderedIssueSet)
    days: list[tuple[date, DailySummary | None]] = field(default_factory=list)

    def add(self, day: date, summary: DailySummary | None) -> None:
        """Fold one day in. None means no report existed for that date."""
        self.days.append((day, summary))
        if summary is None:
            return
        self.total_minutes += summary.minutes_worked
        self.issues.update(summary.issues)


def window_dates(days: int, include_today: bool, anchor: date) -> list[date]:
    """
    List the calendar dates in the window, most recent first.

    Syntax notes:
    - range(start, end + 1) is empty when end < start, so days <= 0 gives []
    - anchor - timedelta(days=i) handles month, year and leap-day rollover

    Args:
        days: Window size. Zero or negative means an empty window.
        include_today: Whether offset 0 (the anchor itself) is in the window.
        anchor: The date offsets are counted back from.

    Returns:
        Dates from newest to oldest.
    """
    start = 0 if include_today else 1
    end = days - 1 if include_today else days
    return [anchor - timedelta(days=offset) for offset in range(start, end + 1)]


def _reports(
    read_report: ReportReader, days: int, include_today: bool, anchor: date
) -> Iterator[tuple[date, str | None]]:
    for day in window_dates(days, include_today, anchor):
        yield day, read_report(day)


def compute_hours(days: int, include_today: bool, anchor: date, read_report: ReportReader) -> int:
    """Total minutes worked across the window. Missing days add nothing."""
    total = 0
    for _day, text in _reports(read_report, days, include_today, anchor):
        if text is not None:
            total += daily_minutes(text)
    return total


def compute_issues(days: int, include_today: bool, anchor: date, read_report: ReportReader) -> list[str]:
    """Distinct issue identifiers across the window, in first-seen order."""
    issues = OrderedIssueSet()
    for _day, text in _reports(read_report, days, include_today, anchor):
        if text is not None:
            issues.update(daily_issues(text))
    return issues.as_list()


def summarize_window(days: int, include_today: bool, anchor: date, read_report: ReportReader) -> WindowSummary:
    """
    Build the full per-day breakdown for the window.

    Used for the verbose report, which needs to tell "no report" (None)
    apart from "report with zero minutes".
    """
    summary = WindowSummary()
    for day, text in _reports(read_report, days, include_today, anchor):
        summary.add(day, summarize_day(day, text) if text is not None else None)
    return summary
