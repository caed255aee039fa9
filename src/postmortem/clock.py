"""
Clock arithmetic for daily postmortem reports.

Reports write times in 12-hour notation ("9:00am", "5:30 p"). Everything
downstream works in plain integers: minutes since local midnight.
"""


MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = 24 * MINUTES_PER_HOUR


def normalize(hour: int, minute: int, meridiem: str) -> int:
    """
    Convert a 12-hour clock reading into minutes since midnight.

    Syntax notes:
    - Only the first letter of the meridiem matters ("a"/"am", "p"/"pm")
    - 12am is the midnight hour, so hour 12 counts as 0 in the morning
    - 12pm is already past noon, so 12 is NOT added again in the afternoon

    Examples:
        normalize(9, 0, "a")   -> 540
        normalize(12, 15, "a") -> 15
        normalize(12, 0, "p")  -> 720
        normalize(1, 0, "p")   -> 780

    Args:
        hour: 1-12, as captured from the report text
        minute: 0-59
        meridiem: "a" or "p" (longer forms like "pm" are accepted)

    Returns:
        Minutes since midnight, 0-1439 for in-range input.
    """
    # hour % 12 folds 12 down to 0; the afternoon then adds the 12 back
    hours_since_midnight = hour % 12
    if meridiem[:1] == "p":
        hours_since_midnight += 12
    return hours_since_midnight * MINUTES_PER_HOUR + minute


def format_minutes(total: int) -> str:
    """
    Format a minute count as zero-padded HH:MM.

    Hours are not wrapped at 24 (a week of work reads "40:00"), and a
    negative total keeps its sign in front ("-00:15").
    """
    sign = "-" if total < 0 else ""
    # divmod on the absolute value keeps minutes in 0-59 for negative totals
    hours, minutes = divmod(abs(total), MINUTES_PER_HOUR)
    return f"{sign}{hours:02d}:{minutes:02d}"
