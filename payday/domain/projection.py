"""Balance projection - core date-window logic for the billing cycle"""

from decimal import Decimal
from typing import Iterable

from payday.domain.models import Payment, Projection


def window_wraps(current_day: int, reference_day: int) -> bool:
    """
    Whether the window from today to the reference day crosses a month end.

    A reference day on or before today's day of month means the next payday
    falls in the following month.
    """
    return reference_day <= current_day


def falls_in_window(day_paid: int, current_day: int, reference_day: int) -> bool:
    """
    Decide whether a payment day lies inside the projection window.

    Days are compared as plain integers with no knowledge of month length,
    so a day 31 bill still counts in a 30-day month.

    - Same month:  current_day < day_paid <= reference_day
    - Wrapping:    day_paid > current_day (rest of this month)
                   or day_paid <= reference_day (start of next month)
    """
    if window_wraps(current_day, reference_day):
        return day_paid > current_day or day_paid <= reference_day
    return current_day < day_paid <= reference_day


def build_projection(
    starting_balance: Decimal,
    current_day: int,
    reference_day: int,
    payments: Iterable[Payment],
) -> Projection:
    """
    Work out which payments are still due before the reference day and what
    the balance will be once they have gone out.

    Amounts are summed at full Decimal precision. Rounding for display is the
    caller's job.

    Args:
        starting_balance: Balance today
        current_day: Today's day of month (injected, never read from the clock)
        reference_day: Day of month the window ends on, normally payday
        payments: Recurring payments to consider

    Returns:
        Projection with the due payments (input order), their total and the
        projected balance
    """
    due = [p for p in payments if falls_in_window(p.day_paid, current_day, reference_day)]
    total_due = sum((p.amount for p in due), Decimal("0"))

    return Projection(
        starting_balance=starting_balance,
        current_day=current_day,
        reference_day=reference_day,
        wraps=window_wraps(current_day, reference_day),
        due=due,
        total_due=total_due,
        projected_balance=starting_balance - total_due,
    )


def project(
    starting_balance: Decimal,
    current_day: int,
    reference_day: int,
    payments: Iterable[Payment],
) -> Decimal:
    """Balance left at the reference day after all due payments"""
    return build_projection(starting_balance, current_day, reference_day, payments).projected_balance
