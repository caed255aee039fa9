"""
Locate and read daily postmortem reports.

This module is the record store: it maps a calendar date to the report
file for that day and hands back the raw text. Layout on disk (default):

    <reports root>/2026/10/Daily Postmortem-2026-10-16.txt
"""

from collections.abc import Callable
from datetime import date
from pathlib import Path

from . import config


def get_report_path(
    report_date: date,
    reports_path: Path | None = None,
    template: str | None = None,
) -> Path:
    """
    Return where the report for a given date lives.

    Syntax notes:
    - str.format() hands the date object to date.__format__, so
      "{date:%Y-%m-%d}" in the template behaves like strftime("%Y-%m-%d")
    - The `/` operator on Path joins segments, including ones with "/" inside

    Args:
        report_date: The calendar day of the report.
        reports_path: Override the configured root (useful for testing).
        template: Override the configured filename template.

    Returns:
        Full path to the report file (which may not exist).
    """
    if reports_path is None:
        reports_path = config.get_reports_path()
    if template is None:
        template = config.get("reports.filename_template")

    return reports_path / template.format(date=report_date)


def read_report(report_date: date, reports_path: Path | None = None) -> str | None:
    """
    Read the report for a specific date.

    Returns:
        The file's text, or None when there is no report for that day.
    """
    filepath = get_report_path(report_date, reports_path)

    if not filepath.is_file():
        return None

    # errors="replace" turns stray bytes into U+FFFD instead of raising,
    # so one badly-encoded report cannot abort a whole window
    return filepath.read_text(encoding=config.get("reports.encoding", "utf-8"), errors="replace")


def make_reader(reports_path: Path | None = None) -> Callable[[date], str | None]:
    """
    Bind read_report() to a report root.

    The window functions take a plain date -> text callable; this builds one
    for reports on disk.
    """

    def reader(report_date: date) -> str | None:
        return read_report(report_date, reports_path)

    return reader
