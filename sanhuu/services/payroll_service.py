"""Salary proration and statutory payroll decomposition.

Rounding order matters: social insurance, health insurance, personal income tax
and the employer contribution are each rounded to whole tugrik on their own,
in that order. Rounding anywhere else moves the net salary by up to one unit.
"""
from __future__ import annotations

import logging
from decimal import Decimal
from typing import Iterable, Optional

from sanhuu.core.config import settings
from sanhuu.core.exceptions import InvalidWorkDaysError
from sanhuu.metrics import salary_calculation_record
from sanhuu.models.schemas import PayrollRates, PayrollSummaryOut, SalaryInput, SalaryResult
from sanhuu.services.reporting.csv_export import ColumnSpec, render_csv
from sanhuu.utils.money import HUNDRED, ZERO, round_units, to_decimal, units

logger = logging.getLogger(__name__)


PAYROLL_CSV_COLUMNS: list[ColumnSpec] = [
    ("Ажилтны нэр", lambda r: r.employee_name),
    ("Үндсэн цалин", lambda r: r.base_salary),
    ("Бодогдсон цалин", lambda r: r.actual_salary),
    ("Урамшуулал", lambda r: r.bonus),
    ("Нийт цалин", lambda r: r.gross_salary),
    ("НДШ", lambda r: r.social_insurance),
    ("ЭМД", lambda r: r.health_insurance),
    ("ХХОАТ", lambda r: r.personal_income_tax),
    ("Нийт суутгал", lambda r: r.total_deductions),
    ("Гарт олгох", lambda r: r.net_salary),
    ("Ажил олгогчийн НДШ", lambda r: r.employer_social_insurance),
    ("Нийт зардал", lambda r: r.total_employer_cost),
]


def default_payroll_rates() -> PayrollRates:
    """Payroll schedule from application settings."""
    return PayrollRates(
        social_insurance=settings.PAYROLL_SOCIAL_INSURANCE_RATE,
        health_insurance=settings.PAYROLL_HEALTH_INSURANCE_RATE,
        personal_income_tax=settings.PAYROLL_PERSONAL_INCOME_TAX_RATE,
        employer_social_insurance=settings.PAYROLL_EMPLOYER_SOCIAL_INSURANCE_RATE,
        employer_health_insurance=settings.PAYROLL_EMPLOYER_HEALTH_INSURANCE_RATE,
    )


def _pct(value: Decimal, rate: Decimal) -> Decimal:
    return value * rate / HUNDRED


def calculate_salary(payload: SalaryInput, rates: Optional[PayrollRates] = None) -> SalaryResult:
    """Prorate a base salary and split it into employee and employer components.

    Rates are taken from ``rates``, then ``payload.rates``, then settings.

    Raises:
        InvalidWorkDaysError: total_work_days <= 0 or work_days < 0
    """
    total_work_days = to_decimal(payload.total_work_days)
    work_days = to_decimal(payload.work_days)
    if total_work_days <= ZERO:
        raise InvalidWorkDaysError("Нийт ажлын өдөр 0-ээс их байх ёстой", field="totalWorkDays")
    if work_days < ZERO:
        raise InvalidWorkDaysError("Ажилласан өдөр сөрөг байж болохгүй", field="workDays")

    rates = rates or payload.rates or default_payroll_rates()
    warnings: list[str] = []

    actual_salary = payload.base_salary * work_days / total_work_days
    gross = actual_salary + payload.bonus - payload.deductions
    if gross < ZERO:
        warnings.append("Нийт цалин сөрөг байна")
        logger.warning("Negative gross salary for %s: %s", payload.employee_name, gross)
    if work_days > total_work_days:
        warnings.append("Ажилласан өдөр нийт ажлын өдрөөс их байна")

    social_insurance = round_units(_pct(gross, rates.social_insurance))
    health_insurance = round_units(_pct(gross, rates.health_insurance))
    taxable_income = gross - social_insurance - health_insurance
    personal_income_tax = round_units(_pct(taxable_income, rates.personal_income_tax))

    total_deductions = social_insurance + health_insurance + personal_income_tax
    net_salary = gross - total_deductions

    employer_rate = rates.employer_social_insurance + rates.employer_health_insurance
    employer_social_insurance = round_units(_pct(gross, employer_rate))
    total_employer_cost = gross + employer_social_insurance

    salary_calculation_record()
    logger.info(
        "Salary calculated for %s: gross=%s net=%s employer_cost=%s",
        payload.employee_name,
        gross,
        net_salary,
        total_employer_cost,
    )

    return SalaryResult(
        employee_name=payload.employee_name,
        base_salary=float(payload.base_salary),
        actual_salary=units(actual_salary),
        bonus=float(payload.bonus),
        deductions=float(payload.deductions),
        gross_salary=units(gross),
        social_insurance=int(social_insurance),
        health_insurance=int(health_insurance),
        taxable_income=units(taxable_income),
        personal_income_tax=int(personal_income_tax),
        total_deductions=int(total_deductions),
        net_salary=units(net_salary),
        employer_social_insurance=int(employer_social_insurance),
        total_employer_cost=units(total_employer_cost),
        warnings=warnings,
    )


def payroll_csv(results: Iterable[SalaryResult]) -> str:
    """Payroll sheet as CSV text, BOM-prefixed for spreadsheet tools."""
    return render_csv(PAYROLL_CSV_COLUMNS, results, bom=True)


def summarize_payroll(
    employees: Iterable[SalaryInput],
    rates: Optional[PayrollRates] = None,
    fmt: str = "json",
) -> PayrollSummaryOut:
    """Calculate every employee and total the batch."""
    results = [calculate_salary(e, rates) for e in employees]
    return PayrollSummaryOut(
        employees=results,
        employee_count=len(results),
        total_gross_salary=sum(r.gross_salary for r in results),
        total_net_salary=sum(r.net_salary for r in results),
        total_employer_cost=sum(r.total_employer_cost for r in results),
        csv_data=payroll_csv(results) if fmt == "csv" else None,
    )
