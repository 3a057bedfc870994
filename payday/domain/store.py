"""Payment store - ordered, name-indexed collection of recurring payments"""

from decimal import Decimal
from typing import Dict, Iterable, Iterator, List, Optional

from payday.domain.exceptions import DuplicatePaymentError, PaymentNotFoundError
from payday.domain.models import Payment


class PaymentStore:
    """
    Recurring payments keyed by name.

    Backed by an insertion-ordered dict, so lookups by name are O(1) while the
    order the payments were loaded in is kept for saving back to disk.
    Any successful mutation sets ``dirty`` so callers know to persist.
    """

    def __init__(self, payments: Iterable[Payment] = ()):
        self._payments: Dict[str, Payment] = {}
        for payment in payments:
            if payment.name in self._payments:
                raise DuplicatePaymentError(payment.name)
            self._payments[payment.name] = payment
        self.dirty = False

    def __iter__(self) -> Iterator[Payment]:
        return iter(self._payments.values())

    def __len__(self) -> int:
        return len(self._payments)

    def __contains__(self, name: object) -> bool:
        return name in self._payments

    @property
    def payments(self) -> List[Payment]:
        """Payments in insertion order"""
        return list(self._payments.values())

    def find(self, name: str) -> Optional[Payment]:
        """Case-sensitive exact lookup by name"""
        return self._payments.get(name)

    def _require(self, name: str) -> Payment:
        payment = self.find(name)
        if payment is None:
            raise PaymentNotFoundError(name)
        return payment

    def set_amount(self, name: str, amount: Decimal) -> None:
        """Overwrite the amount of the named payment"""
        self._require(name).amount = amount
        self.dirty = True

    def set_day_paid(self, name: str, day_paid: int) -> None:
        """Overwrite the day the named payment is paid on"""
        self._require(name).day_paid = day_paid
        self.dirty = True

    def adjust(
        self,
        name: str,
        amount: Decimal | None = None,
        day_paid: int | None = None,
    ) -> Payment:
        """
        Apply an amount and/or day change to one payment.

        The name is resolved before anything is modified, so an unknown name
        raises PaymentNotFoundError with the store untouched and still clean.
        """
        payment = self._require(name)
        if amount is not None:
            payment.amount = amount
            self.dirty = True
        if day_paid is not None:
            payment.day_paid = day_paid
            self.dirty = True
        return payment

    def sorted_by_name(self) -> List[Payment]:
        return sorted(self._payments.values(), key=lambda p: p.name)
