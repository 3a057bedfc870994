"""Date manipulation utilities"""

from datetime import date


def day_of_month(on: date | None = None) -> int:
    """Day of month for a date (default: today from the system clock)"""
    if on is None:
        on = date.today()
    return on.day
