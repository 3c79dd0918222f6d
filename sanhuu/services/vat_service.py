"""
VAT Return Service.

Builds the monthly VAT return from a company's transactions:
- income transactions are sales (output VAT)
- expense transactions are purchases (input VAT)

Single Responsibility: VAT return arithmetic. Fetching and storing data is the caller's job.
"""
from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple

from sanhuu.core.exceptions import MissingConfigurationError
from sanhuu.metrics import report_generated_record, report_timer
from sanhuu.models.schemas import (
    Category,
    CompanyInfo,
    CompanySettings,
    Transaction,
    VatCompanyInfo,
    VatPurchases,
    VatReportOut,
    VatSales,
    VatSummary,
    VatTransactionDetail,
    VatTransactionDetails,
)
from sanhuu.services.reporting.aggregation import aggregate, category_index, category_label
from sanhuu.services.reporting.period_utils import resolve_period
from sanhuu.services.reporting.vat import VatSplit, decompose_for_company
from sanhuu.utils.money import ZERO, cents, dsum, round_cents

logger = logging.getLogger(__name__)


def company_info(company: CompanySettings) -> CompanyInfo:
    return CompanyInfo(
        name=company.company_name,
        registration_number=company.registration_number,
        tax_number=company.tax_number or "",
    )


def vat_company_info(company: CompanySettings) -> VatCompanyInfo:
    """Company block of the VAT return, which also states the registration status."""
    return VatCompanyInfo(
        **company_info(company).model_dump(),
        vat_registered=company.vat_registered,
    )


def _detail(txn: Transaction, split: VatSplit, categories) -> VatTransactionDetail:
    shown = split.rounded()
    return VatTransactionDetail(
        date=txn.date,
        document_no=txn.document_no,
        description=txn.description,
        category=category_label(txn, categories),
        total_amount=float(txn.amount),
        vat_amount=float(shown.vat),
        amount_without_vat=float(shown.net),
    )


def generate_vat_report(
    year: int,
    month: int,
    transactions: Iterable[Transaction],
    company: Optional[CompanySettings],
    categories: Optional[Iterable[Category]] = None,
) -> VatReportOut:
    """
    Generate the VAT return for one calendar month.

    Args:
        year: Year (e.g., 2024)
        month: Month (1-12)
        transactions: Company transactions; anything outside the month is ignored
        company: Company tax profile (required)
        categories: Optional category catalog for label resolution

    Returns:
        VatReportOut with sales/purchase totals, VAT summary and detail rows
    """
    if company is None:
        raise MissingConfigurationError("companySettings")

    period = resolve_period(year, month=month)
    index = category_index(categories)

    with report_timer("vat"):
        agg = aggregate(transactions, period.start, period.end, index)

        sales: List[Tuple[Transaction, VatSplit]] = []
        purchases: List[Tuple[Transaction, VatSplit]] = []
        for txn in sorted(agg.transactions, key=lambda t: t.date):
            bucket = sales if txn.type == "income" else purchases
            bucket.append((txn, decompose_for_company(txn.amount, company)))

        vat_on_sales = dsum(split.vat for _, split in sales)
        vat_on_purchases = dsum(split.vat for _, split in purchases)
        output_vat = round_cents(vat_on_sales)
        input_vat = round_cents(vat_on_purchases)
        vat_payable = max(ZERO, output_vat - input_vat)
        vat_refundable = max(ZERO, input_vat - output_vat)

        report = VatReportOut(
            period=period.label,
            start_date=period.start,
            end_date=period.end,
            company_info=vat_company_info(company),
            sales=VatSales(
                total_sales=cents(agg.total_income),
                vatable_sales=cents(agg.total_income - vat_on_sales),
                vat_on_sales=float(output_vat),
            ),
            purchases=VatPurchases(
                total_purchases=cents(agg.total_expense),
                vatable_purchases=cents(agg.total_expense - vat_on_purchases),
                vat_on_purchases=float(input_vat),
            ),
            vat_summary=VatSummary(
                output_vat=float(output_vat),
                input_vat=float(input_vat),
                vat_payable=float(vat_payable),
                vat_refundable=float(vat_refundable),
            ),
            transaction_details=VatTransactionDetails(
                sales=[_detail(t, s, index) for t, s in sales],
                purchases=[_detail(t, s, index) for t, s in purchases],
            ),
        )

    report_generated_record("vat")
    logger.info(
        "VAT report generated: period=%s output_vat=%s input_vat=%s payable=%s",
        period.label,
        output_vat,
        input_vat,
        vat_payable,
    )
    return report
