"""
Classify single lines of a daily postmortem report.

A report is free text, but a handful of lines carry structure:

    Start Time: 9:00am          (or "Arrival Time:")
    Stop Time: 5:30 pm          (or "Departure Time:")
    Lunch/Breaks: 1:15 mins     (optional H: before the minutes)
    Fixed the export bug, see #1423 and #1430

classify() turns one line into one of the tagged results below. Callers
dispatch on the type with isinstance() (or a match statement).
"""

import re
from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Patterns
# ---------------------------------------------------------------------------

# Regex breakdown for the clock markers:
# - (?:Start|Arrival) Time:  = one of the two labels, case-sensitive, then a colon
# - \s+                      = at least one whitespace character
# - (\d{1,2}):(\d{2})        = H:MM (hour and minute captured separately)
# - \s?                      = an optional single space before am/pm
# - ([ap])m?                 = only the first letter decides; the "m" is optional
START_PATTERN = re.compile(r"^\s*(?:Start|Arrival) Time:\s+(\d{1,2}):(\d{2})\s?([ap])m?")
STOP_PATTERN = re.compile(r"^\s*(?:Stop|Departure) Time:\s+(\d{1,2}):(\d{2})\s?([ap])m?")

# (?:(\d+):)? makes the hour group optional; "min" may be followed by anything
# ("mins", "minutes", "min (coffee)")
BREAK_PATTERN = re.compile(r"^\s*Lunch/Breaks:\s+(?:(\d+):)?(\d+)\s?min")

# "#" immediately followed by digits, anywhere in the line
ISSUE_PATTERN = re.compile(r"#(\d+)")


# ---------------------------------------------------------------------------
# Classification results
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Start:
    hour: int
    minute: int
    meridiem: str


@dataclass(frozen=True)
class Stop:
    hour: int
    minute: int
    meridiem: str


@dataclass(frozen=True)
class Break:
    minutes: int


@dataclass(frozen=True)
class IssueRefs:
    ids: tuple[str, ...]


@dataclass(frozen=True)
class Ignored:
    pass


IGNORED = Ignored()


# ---------------------------------------------------------------------------
# Classifier
# ---------------------------------------------------------------------------

def find_issue_ids(line: str) -> list[str]:
    """Return every "#<digits>" reference in the line, left to right, without the "#"."""
    return ISSUE_PATTERN.findall(line)


def classify(line: str) -> Start | Stop | Break | IssueRefs | Ignored:
    """
    Classify one line of a report.

    Structural markers win over incidental issue references: a line like
    "Lunch/Breaks: 30 min (#12 standup)" is a Break. The issue extractor
    scans every line on its own, so nothing is lost.

    Malformed markers ("Start Time: around nine") are not errors; they fall
    through to the issue scan and usually end up Ignored.

    Args:
        line: One line of report text, with or without its trailing newline.

    Returns:
        Exactly one of Start, Stop, Break, IssueRefs or IGNORED.
    """
    match = START_PATTERN.match(line)
    if match:
        return Start(int(match.group(1)), int(match.group(2)), match.group(3))

    match = STOP_PATTERN.match(line)
    if match:
        return Stop(int(match.group(1)), int(match.group(2)), match.group(3))

    match = BREAK_PATTERN.match(line)
    if match:
        # A missing hour group comes back as None; treat it as zero hours
        hours = int(match.group(1) or 0)
        return Break(hours * 60 + int(match.group(2)))

    ids = find_issue_ids(line)
    if ids:
        return IssueRefs(tuple(ids))

    return IGNORED
