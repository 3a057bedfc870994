"""Pydantic models for the on-disk payment file"""

from decimal import Decimal
from typing import Any, List

from pydantic import BaseModel, Field, StrictInt, field_validator

from payday.domain.models import AMOUNT_DECIMAL_PLACES, AMOUNT_MAX_DIGITS, Payment


class PaymentRecord(BaseModel):
    """Single bill entry in the payment file"""

    name: str = Field(..., min_length=1)
    amount: Decimal = Field(..., max_digits=AMOUNT_MAX_DIGITS, decimal_places=AMOUNT_DECIMAL_PLACES)
    day_paid: StrictInt

    @field_validator("name", mode="before")
    @classmethod
    def name_from_number(cls, value: Any) -> Any:
        # `name: 2024` in hand-edited YAML arrives as an int
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("amount", mode="before")
    @classmethod
    def amount_from_text(cls, value: Any) -> Any:
        # YAML hands back floats for bare 10.1; go through str so the Decimal is exact
        if isinstance(value, bool):
            raise ValueError("amount must be a number or a numeric string")
        if isinstance(value, float):
            return str(value)
        return value

    def to_domain(self) -> Payment:
        return Payment(name=self.name, amount=self.amount, day_paid=self.day_paid)

    @classmethod
    def from_domain(cls, payment: Payment) -> "PaymentRecord":
        return cls(name=payment.name, amount=payment.amount, day_paid=payment.day_paid)


class PaymentFile(BaseModel):
    """Root mapping of the payment file"""

    payments: List[PaymentRecord] = Field(default_factory=list)

    @field_validator("payments", mode="before")
    @classmethod
    def empty_list_for_null(cls, value: Any) -> Any:
        # `payments:` with nothing under it parses as None
        return [] if value is None else value

    def to_yaml_data(self) -> dict:
        """Plain data for yaml.safe_dump, amounts kept as strings"""
        return {
            "payments": [
                {"name": p.name, "amount": str(p.amount), "day_paid": p.day_paid}
                for p in self.payments
            ]
        }
