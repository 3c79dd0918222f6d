"""Income tax return computation.

Quarterly or annual return: VAT is backed out of income and expenses at the
aggregate level (VAT-registered companies only), the net difference is taxed at
the company's flat income tax rate, and a zero-seeded monthly breakdown is
attached. Losses produce no tax and are not carried forward.
"""
from __future__ import annotations

import logging
from typing import Iterable, Optional

from sanhuu.core.exceptions import MissingConfigurationError
from sanhuu.metrics import report_generated_record, report_timer
from sanhuu.models.schemas import (
    Category,
    CompanySettings,
    ExpenseSection,
    IncomeSection,
    IncomeTaxReportOut,
    MonthlyBreakdownEntry,
    TaxCalculation,
    Transaction,
)
from sanhuu.services.reporting.aggregation import Aggregation, aggregate, category_index
from sanhuu.services.reporting.period_utils import month_label, resolve_period
from sanhuu.services.reporting.vat import decompose_for_company, effective_income_tax_rate
from sanhuu.services.vat_service import company_info
from sanhuu.utils.money import HUNDRED, ZERO, cents, round_units

logger = logging.getLogger(__name__)


def monthly_breakdown(agg: Aggregation) -> list[MonthlyBreakdownEntry]:
    """One entry per month of the aggregation window, in calendar order."""
    entries = []
    for (_, month), totals in agg.by_month.items():
        income, expense = totals["income"], totals["expense"]
        entries.append(
            MonthlyBreakdownEntry(
                month=month_label(month),
                income=cents(income),
                expense=cents(expense),
                profit=cents(income - expense),
            )
        )
    return entries


def generate_income_tax_report(
    year: int,
    quarter: Optional[int],
    transactions: Iterable[Transaction],
    company: Optional[CompanySettings],
    categories: Optional[Iterable[Category]] = None,
) -> IncomeTaxReportOut:
    """
    Generate the income tax return for a quarter, or the whole year when quarter is None.

    Args:
        year: Year (e.g., 2024)
        quarter: 1-4, or None for an annual return
        transactions: Company transactions; anything outside the window is ignored
        company: Company tax profile (required)
        categories: Optional category catalog for label resolution

    Returns:
        IncomeTaxReportOut with income, expenses, tax calculation and monthly breakdown
    """
    if company is None:
        raise MissingConfigurationError("companySettings")

    period = resolve_period(year, quarter=quarter)
    tax_rate = effective_income_tax_rate(company)

    with report_timer("income_tax"):
        agg = aggregate(transactions, period.start, period.end, category_index(categories))

        gross_income = decompose_for_company(agg.total_income, company).net
        operating_expenses = decompose_for_company(agg.total_expense, company).net
        taxable_income = max(ZERO, gross_income - operating_expenses)
        income_tax = round_units(taxable_income * tax_rate / HUNDRED)
        prepaid_tax = ZERO
        tax_payable = income_tax - prepaid_tax

        report = IncomeTaxReportOut(
            period=period.label,
            start_date=period.start,
            end_date=period.end,
            company_info=company_info(company),
            income=IncomeSection(
                gross_income=cents(gross_income),
                total_income=cents(gross_income),
            ),
            expenses=ExpenseSection(
                operating_expenses=cents(operating_expenses),
                total_expenses=cents(operating_expenses),
            ),
            tax_calculation=TaxCalculation(
                taxable_income=cents(taxable_income),
                tax_rate=float(tax_rate),
                income_tax=int(income_tax),
                prepaid_tax=int(prepaid_tax),
                tax_payable=int(tax_payable),
            ),
            monthly_breakdown=monthly_breakdown(agg),
        )

    report_generated_record("income_tax")
    logger.info(
        "Income tax report generated: period=%s taxable_income=%s income_tax=%s",
        period.label,
        taxable_income,
        income_tax,
    )
    return report
