"""Input records handed to the reporting engine by the host application."""
from __future__ import annotations

import datetime as dt
from decimal import Decimal
from typing import Literal

from pydantic import Field, field_serializer

from .base import FrozenCamelModel

TransactionType = Literal["income", "expense"]

UNCATEGORIZED = "Ангилаагүй"

# Largest accepted money value; keeps cent rounding inside Decimal's 28-digit context.
MAX_AMOUNT = Decimal("1e15")


class Transaction(FrozenCamelModel):
    """A dated money movement. Direction lives in ``type``, never in the sign."""
    id: str
    amount: Decimal = Field(..., ge=0, le=MAX_AMOUNT, description="Amount in tugrik, VAT inclusive")
    type: TransactionType
    date: dt.date
    category_id: str | None = None
    category_name: str | None = None
    account: str | None = None
    document_no: str | None = None
    description: str | None = None

    @field_serializer("amount", when_used="json")
    def _serialize_amount(self, value: Decimal) -> float:
        return float(value)


class Category(FrozenCamelModel):
    id: str
    name: str
    type: TransactionType
    color: str | None = None


class CompanySettings(FrozenCamelModel):
    """Company tax profile.

    Rates are percentages. ``None`` means "not set" and falls back to the
    configured defaults; an explicit ``0`` is honoured.
    """
    vat_registered: bool = False
    vat_rate: Decimal | None = Field(None, ge=0, le=100)
    income_tax_rate: Decimal | None = Field(None, ge=0, le=100)
    company_name: str | None = None
    registration_number: str | None = None
    tax_number: str | None = None
