"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import List


@dataclass
class Payment:
    """Recurring bill paid once a month on a fixed day"""

    name: str
    amount: Decimal
    day_paid: int  # day of month, not checked against month length


@dataclass
class Projection:
    """Breakdown of a projected balance at the reference day"""

    starting_balance: Decimal
    current_day: int
    reference_day: int
    wraps: bool
    due: List[Payment] = field(default_factory=list)
    total_due: Decimal = Decimal("0")
    projected_balance: Decimal = Decimal("0")


# Largest money value accepted from input or the payment file. Keeps every
# sum and the cent rounding inside the default 28-digit decimal context.
AMOUNT_MAX_DIGITS = 18
AMOUNT_DECIMAL_PLACES = 6
