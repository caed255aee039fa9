"""
Per-day computations over one report's text.

Two independent passes run over the same lines:
- daily_minutes(): a small state machine pairing Start and Stop markers
  and subtracting breaks
- daily_issues(): every "#<digits>" reference in first-seen order
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from datetime import date

from .classify import Break, Start, Stop, classify, find_issue_ids
from .clock import normalize


class OrderedIssueSet:
    """
    Issue identifiers in first-seen order, without duplicates.

    A set answers "seen it?" in constant time; the list remembers the order
    for output. Both are only ever appended to.
    """

    def __init__(self, ids: Iterable[str] = ()):
        self._seen: set[str] = set()
        self._order: list[str] = []
        self.update(ids)

    def add(self, issue_id: str) -> bool:
        """Add one identifier. Returns True if it was new."""
        if issue_id in self._seen:
            return False
        self._seen.add(issue_id)
        self._order.append(issue_id)
        return True

    def update(self, ids: Iterable[str]) -> None:
        for issue_id in ids:
            self.add(issue_id)

    def __contains__(self, issue_id: object) -> bool:
        return issue_id in self._seen

    def __iter__(self) -> Iterator[str]:
        return iter(self._order)

    def __len__(self) -> int:
        return len(self._order)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, OrderedIssueSet):
            return self._order == other._order
        return NotImplemented

    def __repr__(self) -> str:
        return f"OrderedIssueSet({self._order!r})"

    def as_list(self) -> list[str]:
        return list(self._order)


@dataclass(frozen=True)
class DailySummary:
    """
    What one report contributed.

    minutes_worked is signed: a day with only a break logged comes out
    negative, and that is kept as-is.
    """

    day: date
    minutes_worked: int
    issues: tuple[str, ...] = ()
    unpaired_stops: int = 0
    unmatched_starts: int = 0


@dataclass
class _DurationState:
    pending_start: int | None = None
    accumulated: int = 0
    unpaired_stops: int = 0
    unmatched_starts: int = 0


def _split_lines(text: str | Iterable[str]) -> Iterable[str]:
    # Accept either the whole report as one string or an iterable of lines
    if isinstance(text, str):
        return text.splitlines()
    return text


def _run_duration(lines: Iterable[str]) -> _DurationState:
    state = _DurationState()

    for line in lines:
        marker = classify(line)

        if isinstance(marker, Start):
            if state.pending_start is not None:
                # The earlier start never got a stop; the new one replaces it
                state.unmatched_starts += 1
            state.pending_start = normalize(marker.hour, marker.minute, marker.meridiem)

        elif isinstance(marker, Stop):
            if state.pending_start is None:
                # No start to pair with; the stop contributes nothing
                state.unpaired_stops += 1
                continue
            stop = normalize(marker.hour, marker.minute, marker.meridiem)
            state.accumulated += stop - state.pending_start
            state.pending_start = None

        elif isinstance(marker, Break):
            state.accumulated -= marker.minutes

        # IssueRefs and Ignored lines do not affect the duration

    if state.pending_start is not None:
        state.unmatched_starts += 1

    return state


def daily_minutes(text: str | Iterable[str]) -> int:
    """
    Net minutes worked according to one report.

    Each Start is paired with the next Stop in document order, and every
    pair adds (stop - start). Every Lunch/Breaks line subtracts its minutes,
    whether or not a session is open at that point.

    Args:
        text: The report's full text, or its lines in order.

    Returns:
        Signed minute total (not clamped at zero).
    """
    return _run_duration(_split_lines(text)).accumulated


def daily_issues(text: str | Iterable[str]) -> list[str]:
    """
    Distinct issue identifiers referenced in one report, first-seen order.

    Every line is scanned, including Start/Stop/Break lines, since "#123"
    may appear anywhere.
    """
    issues = OrderedIssueSet()
    for line in _split_lines(text):
        issues.update(find_issue_ids(line))
    return issues.as_list()


def summarize_day(day: date, text: str) -> DailySummary:
    """Run both passes over one report and bundle the result."""
    lines = text.splitlines()
    state = _run_duration(lines)
    return DailySummary(
        day=day,
        minutes_worked=state.accumulated,
        issues=tuple(daily_issues(lines)),
        unpaired_stops=state.unpaired_stops,
        unmatched_starts=state.unmatched_starts,
    )
