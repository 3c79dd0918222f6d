"""Payroll request/response schemas."""
from __future__ import annotations

from decimal import Decimal
from typing import Literal

from pydantic import Field

from .base import CamelModel, FrozenCamelModel
from .transaction import MAX_AMOUNT

MAX_WORK_DAYS = Decimal("366")


class PayrollRates(FrozenCamelModel):
    """Statutory payroll schedule, in percent of gross salary."""
    social_insurance: Decimal = Field(Decimal("11.5"), ge=0, le=100)
    health_insurance: Decimal = Field(Decimal("2"), ge=0, le=100)
    personal_income_tax: Decimal = Field(Decimal("10"), ge=0, le=100)
    employer_social_insurance: Decimal = Field(Decimal("12.5"), ge=0, le=100)
    employer_health_insurance: Decimal = Field(Decimal("2"), ge=0, le=100)


class SalaryInput(CamelModel):
    employee_name: str = Field(..., max_length=200)
    base_salary: Decimal = Field(..., ge=0, le=MAX_AMOUNT)
    work_days: Decimal = Field(..., ge=0, le=MAX_WORK_DAYS, decimal_places=2)
    total_work_days: Decimal = Field(..., le=MAX_WORK_DAYS, decimal_places=2)
    bonus: Decimal = Field(Decimal("0"), ge=0, le=MAX_AMOUNT)
    deductions: Decimal = Field(Decimal("0"), ge=0, le=MAX_AMOUNT)
    rates: PayrollRates | None = None


class SalaryResult(CamelModel):
    employee_name: str
    base_salary: float
    actual_salary: int
    bonus: float
    deductions: float
    gross_salary: int
    social_insurance: int
    health_insurance: int
    taxable_income: int
    personal_income_tax: int
    total_deductions: int
    net_salary: int
    employer_social_insurance: int
    total_employer_cost: int
    warnings: list[str] = []


class PayrollRequest(CamelModel):
    employees: list[SalaryInput] = Field(..., min_length=1)
    rates: PayrollRates | None = None
    format: Literal["json", "csv"] = "json"


class PayrollSummaryOut(CamelModel):
    employees: list[SalaryResult]
    employee_count: int
    total_gross_salary: int
    total_net_salary: int
    total_employer_cost: int
    csv_data: str | None = None
