"""Currency and payment display helpers"""

from decimal import ROUND_HALF_UP, Decimal

from payday.config import settings
from payday.domain.models import Payment, Projection

CENTS = Decimal("0.01")


def format_currency(amount: Decimal, symbol: str | None = None) -> str:
    """
    Round to two places for display: Decimal("-200") -> "-£200.00".

    This is the only place rounding happens.
    """
    if symbol is None:
        symbol = settings.currency_symbol
    rounded = amount.quantize(CENTS, rounding=ROUND_HALF_UP)
    sign = "-" if rounded < 0 else ""
    return f"{sign}{symbol}{abs(rounded):,.2f}"


def describe_payment(payment: Payment, symbol: str | None = None) -> str:
    return "\n".join(
        [
            f"Bill: {payment.name}",
            f"Amount: {format_currency(payment.amount, symbol)}",
            f"Day paid: {payment.day_paid}",
        ]
    )


def payment_line(payment: Payment, show_amount: bool, show_day_paid: bool, symbol: str | None = None) -> str:
    """One line of `payday list` output"""
    line = payment.name
    if show_amount:
        line += f" {format_currency(payment.amount, symbol)}"
    if show_day_paid:
        line += f", day paid: {payment.day_paid}"
    return line


def breakdown_lines(projection: Projection, symbol: str | None = None) -> list[str]:
    """Due payments and their total, for `compute --breakdown`"""
    lines = [
        f"{p.name} (day {p.day_paid}): {format_currency(p.amount, symbol)}"
        for p in projection.due
    ]
    lines.append(f"Total due: {format_currency(projection.total_due, symbol)}")
    return lines
