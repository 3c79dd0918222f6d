from __future__ import annotations

import os

os.environ.setdefault("APP_ENV", "test")

import datetime as dt  # noqa: E402
from decimal import Decimal  # noqa: E402
from itertools import count  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from sanhuu.api.main import app  # noqa: E402
from sanhuu.core.security import create_access_token  # noqa: E402
from sanhuu.models.schemas import CompanySettings, Transaction  # noqa: E402

_ids = count(1)


def make_txn(
    amount: str | int,
    type: str = "income",
    date: dt.date | str = "2024-03-15",
    **extra,
) -> Transaction:
    """Build a transaction with a unique id; dates may be ISO strings."""
    if isinstance(date, str):
        date = dt.date.fromisoformat(date)
    return Transaction(
        id=extra.pop("id", f"t{next(_ids)}"),
        amount=Decimal(str(amount)),
        type=type,
        date=date,
        **extra,
    )


def txn_json(txn: Transaction) -> dict:
    return txn.model_dump(mode="json", by_alias=True, exclude_none=True)


@pytest.fixture
def client():  # noqa: D401 - simple factory fixture
    """Provide a FastAPI TestClient bound to the application."""
    return TestClient(app)


@pytest.fixture
def auth_headers():
    token = create_access_token("user-1")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def vat_company():
    return CompanySettings(
        vat_registered=True,
        vat_rate=Decimal("10"),
        income_tax_rate=Decimal("10"),
        company_name="Тест ХХК",
        registration_number="1234567",
        tax_number="TIN-42",
    )


@pytest.fixture
def plain_company():
    return CompanySettings(vat_registered=False, company_name="Жижиг ХХК", registration_number="7654321")
