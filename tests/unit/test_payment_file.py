"""Unit tests for YAML payment file persistence"""

import os
import stat
import pytest
import yaml
from decimal import Decimal
from payday.domain.exceptions import (
    ConfigNotFoundError,
    ConfigUnreadableError,
    DuplicatePaymentError,
)
from payday.infrastructure.storage.payment_file import PaymentFileRepository


def test_load_payment_file(repo):
    store = repo.load()

    assert [p.name for p in store] == ["Rent", "Phone", "Water"]
    assert store.find("Rent").amount == Decimal("500.00")
    assert store.find("Water").amount == Decimal("20")
    assert store.find("Phone").day_paid == 28
    assert store.dirty is False


def test_float_amounts_are_exact(write_payment_file):
    path = write_payment_file("payments:\n  - {name: Gas, amount: 10.1, day_paid: 6}\n")

    store = PaymentFileRepository(path).load()

    assert store.find("Gas").amount == Decimal("10.1")


def test_missing_file(tmp_path):
    repo = PaymentFileRepository(tmp_path / "nope.yml")

    with pytest.raises(ConfigNotFoundError) as exc_info:
        repo.load()

    assert exc_info.value.path == tmp_path / "nope.yml"


@pytest.mark.parametrize("text", ["", "payments:\n", "payments: []\n"])
def test_empty_file_is_empty_store(write_payment_file, text):
    store = PaymentFileRepository(write_payment_file(text)).load()
    assert len(store) == 0


@pytest.mark.parametrize(
    "text",
    [
        "payments: [unclosed\n",  # YAML syntax
        "- name: Rent\n",  # top level not a mapping
        "payments:\n  - {name: Rent, amount: lots, day_paid: 18}\n",
        "payments:\n  - {name: Rent, amount: '500', day_paid: 18.5}\n",
        "payments:\n  - {name: Rent, amount: '500', day_paid: '18'}\n",
        "payments:\n  - {name: Rent, amount: true, day_paid: 18}\n",
        "payments:\n  - {name: Rent, day_paid: 18}\n",
    ],
)
def test_malformed_file(write_payment_file, text):
    repo = PaymentFileRepository(write_payment_file(text))

    with pytest.raises(ConfigUnreadableError):
        repo.load()


def test_duplicate_names_in_file(write_payment_file):
    path = write_payment_file(
        "payments:\n"
        "  - {name: Rent, amount: '500', day_paid: 18}\n"
        "  - {name: Rent, amount: '450', day_paid: 1}\n"
    )

    with pytest.raises(DuplicatePaymentError):
        PaymentFileRepository(path).load()


def test_day_paid_not_range_checked(write_payment_file):
    """Stored days are taken as-is, even if no month has them"""
    path = write_payment_file("payments:\n  - {name: Odd, amount: 1, day_paid: 42}\n")
    assert PaymentFileRepository(path).load().find("Odd").day_paid == 42


def test_save_keeps_order_and_precision(repo):
    store = repo.load()
    store.set_amount("Phone", Decimal("12.345"))

    repo.save(store)

    data = yaml.safe_load(repo.path.read_text(encoding="utf-8"))
    assert data == {
        "payments": [
            {"name": "Rent", "amount": "500.00", "day_paid": 18},
            {"name": "Phone", "amount": "12.345", "day_paid": 28},
            {"name": "Water", "amount": "20", "day_paid": 3},
        ]
    }
    assert store.dirty is False
    assert repo.load().find("Phone").amount == Decimal("12.345")


def test_save_leaves_no_temp_files(repo):
    repo.save(repo.load())
    assert [p.name for p in repo.path.parent.iterdir()] == ["payments.yml"]


def test_save_creates_parent_directory(tmp_path, store):
    repo = PaymentFileRepository(tmp_path / "nested" / "dir" / "payments.yml")

    repo.save(store)

    assert [p.name for p in repo.load()] == ["Phone", "Water"]


def test_ensure_exists_writes_skeleton(tmp_path):
    repo = PaymentFileRepository(tmp_path / "payday" / "payments.yml")

    assert repo.ensure_exists() is True
    assert repo.ensure_exists() is False
    assert len(repo.load()) == 0


def test_ensure_exists_keeps_existing_file(repo):
    before = repo.path.read_text(encoding="utf-8")
    assert repo.ensure_exists() is False
    assert repo.path.read_text(encoding="utf-8") == before


def test_oversized_amount_in_file(write_payment_file):
    path = write_payment_file("payments:\n  - {name: Rent, amount: '1e30', day_paid: 18}\n")

    with pytest.raises(ConfigUnreadableError):
        PaymentFileRepository(path).load()


def test_numeric_name_read_as_text(write_payment_file):
    path = write_payment_file("payments:\n  - {name: 2024, amount: '5', day_paid: 1}\n")
    repo = PaymentFileRepository(path)

    store = repo.load()
    assert store.find("2024").amount == Decimal("5")

    repo.save(store)
    assert yaml.safe_load(path.read_text(encoding="utf-8"))["payments"][0]["name"] == "2024"


def test_save_keeps_file_mode(repo):
    os.chmod(repo.path, 0o644)

    repo.save(repo.load())

    assert stat.S_IMODE(repo.path.stat().st_mode) == 0o644
