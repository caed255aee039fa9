import pytest

from postmortem.classify import IGNORED, Break, IssueRefs, Start, Stop, classify, find_issue_ids


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("Start Time: 9:00am", Start(9, 0, "a")),
        ("Start Time: 9:00 am", Start(9, 0, "a")),
        ("Start Time: 9:00a", Start(9, 0, "a")),
        ("Arrival Time: 10:15pm", Start(10, 15, "p")),
        ("Start Time:\t12:05 pm\n", Start(12, 5, "p")),
    ],
)
def test_start_markers(line, expected):
    assert classify(line) == expected


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("Stop Time: 5:30pm", Stop(5, 30, "p")),
        ("Departure Time: 6:00 p", Stop(6, 0, "p")),
        ("Stop Time: 11:45am", Stop(11, 45, "a")),
    ],
)
def test_stop_markers(line, expected):
    assert classify(line) == expected


@pytest.mark.parametrize(
    ("line", "minutes"),
    [
        ("Lunch/Breaks: 30 min", 30),
        ("Lunch/Breaks: 30min", 30),
        ("Lunch/Breaks: 45 minutes", 45),
        ("Lunch/Breaks: 1:15 mins", 75),
        ("Lunch/Breaks: 0:05 min", 5),
    ],
)
def test_break_markers(line, minutes):
    assert classify(line) == Break(minutes)


def test_structural_marker_wins_over_issue_reference():
    assert classify("Lunch/Breaks: 30 min (#12 standup ran long)") == Break(30)
    assert classify("Start Time: 8:00am #7") == Start(8, 0, "a")


def test_issue_reference_lines():
    assert classify("Fixed #42, reviewed #17") == IssueRefs(("42", "17"))
    assert classify("- #5") == IssueRefs(("5",))


@pytest.mark.parametrize(
    "line",
    [
        "",
        "Worked on the export pipeline",
        "start time: 9:00am",  # labels are case-sensitive
        "Start Time: around nine",
        "Start Time 9:00am",  # missing colon
        "Lunch/Breaks: half an hour",
        "Issue # 12",  # "#" must be followed directly by digits
    ],
)
def test_unrecognized_lines_are_ignored(line):
    assert classify(line) is IGNORED


def test_find_issue_ids_scans_the_whole_line():
    assert find_issue_ids("Stop Time: 5:00pm after #3 and #300 (dup #3)") == ["3", "300", "3"]
    assert find_issue_ids("nothing here") == []
