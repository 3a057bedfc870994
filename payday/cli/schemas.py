"""Pydantic models validating command-line input before it reaches the domain"""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, ValidationError, model_validator

from payday.domain.exceptions import InvalidAmountError, InvalidDayError, InvalidInputError
from payday.domain.models import AMOUNT_DECIMAL_PLACES, AMOUNT_MAX_DIGITS

DAY_OF_MONTH = {"ge": 1, "le": 31}
MONEY = {"max_digits": AMOUNT_MAX_DIGITS, "decimal_places": AMOUNT_DECIMAL_PLACES}


class ComputeRequest(BaseModel):
    """Input for `payday compute`"""

    balance: Decimal = Field(..., description="Current account balance", **MONEY)
    reference_day: int = Field(..., description="Day the bill cycle resets, normally payday", **DAY_OF_MONTH)
    current_day: Optional[int] = Field(None, description="Today's day of month (default: system clock)", **DAY_OF_MONTH)
    breakdown: bool = False


class AdjustRequest(BaseModel):
    """Input for `payday adjust`"""

    name: str = Field(..., min_length=1)
    amount: Optional[Decimal] = Field(None, ge=0, description="New bill amount", **MONEY)
    day_paid: Optional[int] = Field(None, description="New day the bill is paid on", **DAY_OF_MONTH)

    @model_validator(mode="after")
    def requires_a_change(self) -> "AdjustRequest":
        if self.amount is None and self.day_paid is None:
            raise ValueError("nothing to adjust: pass --amount and/or --day-paid")
        return self


class ListRequest(BaseModel):
    """Input for `payday list`"""

    show_amount: bool = False
    show_day_paid: bool = False


class EditRequest(BaseModel):
    """Input for `payday edit` (takes no options)"""


AMOUNT_FIELDS = {"balance", "amount"}
DAY_FIELDS = {"reference_day", "current_day", "day_paid"}
DECIMAL_LIMIT_ERRORS = {"decimal_max_digits", "decimal_max_places", "decimal_whole_digits"}


def translate_validation_error(error: ValidationError) -> InvalidInputError:
    """Map the first pydantic error onto the matching domain input error"""
    first = error.errors()[0]
    field_name = str(first["loc"][0]) if first["loc"] else ""
    value = first.get("input")

    if field_name in AMOUNT_FIELDS:
        if first["type"] in ("greater_than_equal", "greater_than"):
            return InvalidAmountError(f"{field_name} not greater than or equal to zero")
        if first["type"] in DECIMAL_LIMIT_ERRORS:
            return InvalidAmountError(
                f"{field_name} must have at most {AMOUNT_MAX_DIGITS} digits and {AMOUNT_DECIMAL_PLACES} decimal places"
            )
        return InvalidAmountError(f"`{value}` isn't a decimal")
    if field_name in DAY_FIELDS:
        if first["type"] in ("greater_than_equal", "less_than_equal"):
            return InvalidDayError(f"{field_name.replace('_', ' ')} not in range 1-31")
        return InvalidDayError(f"`{value}` isn't an integer")
    return InvalidInputError(first["msg"].removeprefix("Value error, "))
