from datetime import date

from postmortem.daily import OrderedIssueSet, daily_issues, daily_minutes, summarize_day


def test_single_session_minus_break():
    report = "Start Time: 9:00am\nStop Time: 5:30pm\nLunch/Breaks: 30 min\n"
    assert daily_minutes(report) == 480


def test_multiple_sessions_sum_independently():
    report = "\n".join(
        [
            "Start Time: 9:00am",
            "Stop Time: 12:00pm",
            "Start Time: 1:00pm",
            "Stop Time: 5:00pm",
        ]
    )
    assert daily_minutes(report) == 180 + 240


def test_break_only_day_is_negative():
    assert daily_minutes("Lunch/Breaks: 15 min") == -15


def test_breaks_apply_anywhere_in_the_report():
    report = [
        "Lunch/Breaks: 10 min",
        "Arrival Time: 8:00 am",
        "Lunch/Breaks: 1:00 min",
        "Departure Time: 4:00 pm",
    ]
    assert daily_minutes(report) == 8 * 60 - 10 - 60


def test_free_text_and_issue_lines_do_not_change_duration():
    report = """Daily Postmortem

Start Time: 10:00am
Worked on #12 and #13
Some notes about the day.
Stop Time: 11:30am
"""
    assert daily_minutes(report) == 90


def test_unmatched_start_is_replaced_by_the_next_start():
    report = ["Start Time: 8:00am", "Start Time: 9:00am", "Stop Time: 10:00am"]
    assert daily_minutes(report) == 60


def test_unpaired_stop_contributes_nothing():
    report = ["Stop Time: 9:00am", "Start Time: 10:00am", "Stop Time: 11:00am"]
    assert daily_minutes(report) == 60


def test_malformed_markers_are_ignored():
    report = ["Start Time: morning", "Stop Time: 5:00pm", "Lunch/Breaks: some"]
    assert daily_minutes(report) == 0


def test_empty_report():
    assert daily_minutes("") == 0
    assert daily_issues("") == []


def test_daily_issues_dedup_in_first_seen_order():
    report = "Start Time: 9:00am #7\nFixed #42 and #17\nFollowed up on #42\nLunch/Breaks: 20 min #7"
    assert daily_issues(report) == ["7", "42", "17"]


def test_summarize_day_counts_diagnostics():
    report = "Stop Time: 8:00am\nStart Time: 9:00am\nStop Time: 10:00am #3\nStart Time: 2:00pm\n"
    summary = summarize_day(date(2026, 10, 16), report)

    assert summary.day == date(2026, 10, 16)
    assert summary.minutes_worked == 60
    assert summary.issues == ("3",)
    assert summary.unpaired_stops == 1
    assert summary.unmatched_starts == 1


class TestOrderedIssueSet:
    def test_keeps_first_seen_order(self):
        issues = OrderedIssueSet(["42", "17"])
        issues.update(["17", "99", "42"])
        assert list(issues) == ["42", "17", "99"]
        assert len(issues) == 3

    def test_add_reports_whether_new(self):
        issues = OrderedIssueSet()
        assert issues.add("1") is True
        assert issues.add("1") is False
        assert "1" in issues
        assert "2" not in issues

    def test_equality_is_order_sensitive(self):
        assert OrderedIssueSet(["1", "2"]) == OrderedIssueSet(["1", "2", "1"])
        assert OrderedIssueSet(["1", "2"]) != OrderedIssueSet(["2", "1"])
