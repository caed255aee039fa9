"""Hours worked and issues touched, read back out of daily postmortem reports."""
