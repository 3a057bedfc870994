"""Pytest fixtures for testing"""

import pytest
from decimal import Decimal
from pathlib import Path
from typing import Callable

from payday.domain.models import Payment
from payday.domain.store import PaymentStore
from payday.infrastructure.storage.payment_file import PaymentFileRepository


PAYMENT_FILE = """\
payments:
  - name: Rent
    amount: '500.00'
    day_paid: 18
  - name: Phone
    amount: '10.00'
    day_paid: 28
  - name: Water
    amount: 20
    day_paid: 3
"""


@pytest.fixture
def sample_payments() -> list[Payment]:
    """Phone and water bills either side of an 18th payday"""
    return [
        Payment(name="Phone", amount=Decimal("10.00"), day_paid=28),
        Payment(name="Water", amount=Decimal("20.00"), day_paid=3),
    ]


@pytest.fixture
def store(sample_payments: list[Payment]) -> PaymentStore:
    return PaymentStore(sample_payments)


@pytest.fixture
def write_payment_file(tmp_path: Path) -> Callable[[str], Path]:
    """Write raw YAML to a temporary payment file and return its path"""

    def _write(text: str) -> Path:
        path = tmp_path / "payments.yml"
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def payment_file(write_payment_file: Callable[[str], Path]) -> Path:
    """Payment file with Rent (18th), Phone (28th) and Water (3rd)"""
    return write_payment_file(PAYMENT_FILE)


@pytest.fixture
def repo(payment_file: Path) -> PaymentFileRepository:
    return PaymentFileRepository(payment_file)
