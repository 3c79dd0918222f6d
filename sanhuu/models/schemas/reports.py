"""Report request/response schemas."""
from __future__ import annotations

import datetime as dt
from typing import Literal

from pydantic import Field

from .base import CamelModel
from .transaction import Category, CompanySettings, Transaction


class ReportInput(CamelModel):
    """Fields every report request carries alongside its own selectors."""
    transactions: list[Transaction] = []
    categories: list[Category] = []


class CompanyInfo(CamelModel):
    name: str | None = None
    registration_number: str | None = None
    tax_number: str = ""


class VatCompanyInfo(CompanyInfo):
    vat_registered: bool


# ----------------------------------------------------------------------------
# VAT return
# ----------------------------------------------------------------------------

class VatReportRequest(ReportInput):
    year: int
    month: int
    company_settings: CompanySettings | None = None


class VatSales(CamelModel):
    total_sales: float
    vatable_sales: float
    vat_on_sales: float
    exempt_sales: float = 0.0


class VatPurchases(CamelModel):
    total_purchases: float
    vatable_purchases: float
    vat_on_purchases: float
    exempt_purchases: float = 0.0


class VatSummary(CamelModel):
    output_vat: float
    input_vat: float
    vat_payable: float
    vat_refundable: float


class VatTransactionDetail(CamelModel):
    date: dt.date
    document_no: str | None
    description: str | None
    category: str
    total_amount: float
    vat_amount: float
    amount_without_vat: float


class VatTransactionDetails(CamelModel):
    sales: list[VatTransactionDetail]
    purchases: list[VatTransactionDetail]


class VatReportOut(CamelModel):
    period: str
    start_date: dt.date
    end_date: dt.date
    company_info: VatCompanyInfo
    sales: VatSales
    purchases: VatPurchases
    vat_summary: VatSummary
    transaction_details: VatTransactionDetails


# ----------------------------------------------------------------------------
# Income tax return
# ----------------------------------------------------------------------------

class IncomeTaxReportRequest(ReportInput):
    year: int
    quarter: int | None = None
    company_settings: CompanySettings | None = None


class IncomeSection(CamelModel):
    gross_income: float
    other_income: float = 0.0
    total_income: float


class ExpenseSection(CamelModel):
    operating_expenses: float
    administrative_expenses: float = 0.0
    other_expenses: float = 0.0
    total_expenses: float


class TaxCalculation(CamelModel):
    taxable_income: float
    tax_rate: float
    income_tax: int
    prepaid_tax: int = 0
    tax_payable: int


class MonthlyBreakdownEntry(CamelModel):
    month: str
    income: float
    expense: float
    profit: float


class IncomeTaxReportOut(CamelModel):
    period: str
    start_date: dt.date
    end_date: dt.date
    company_info: CompanyInfo
    income: IncomeSection
    expenses: ExpenseSection
    tax_calculation: TaxCalculation
    monthly_breakdown: list[MonthlyBreakdownEntry]


# ----------------------------------------------------------------------------
# Generic period report
# ----------------------------------------------------------------------------

ReportType = Literal["monthly", "quarterly", "yearly", "custom"]


class GenericReportRequest(ReportInput):
    report_type: ReportType = "custom"
    start_date: dt.date
    end_date: dt.date
    format: Literal["json", "csv"] = "json"


class ReportPeriodOut(CamelModel):
    start: dt.date
    end: dt.date


class ReportSummary(CamelModel):
    total_income: float
    total_expense: float
    net_profit: float
    transaction_count: int


class GenericReportOut(CamelModel):
    report_type: str
    period: ReportPeriodOut
    summary: ReportSummary
    income_by_category: dict[str, float]
    expense_by_category: dict[str, float]
    transactions: list[Transaction]
    csv_data: str | None = None


# ----------------------------------------------------------------------------
# Dashboard
# ----------------------------------------------------------------------------

class DashboardRequest(CamelModel):
    transactions: list[Transaction] = []
    as_of: dt.date | None = None
    days: int = Field(7, ge=1, le=366)


class DailyPoint(CamelModel):
    date: dt.date
    income: float
    expenses: float


class DashboardSummaryOut(CamelModel):
    total_income: float
    total_expenses: float
    net_balance: float
    recent_transactions: list[Transaction]
    daily: list[DailyPoint]


# ----------------------------------------------------------------------------
# Expense approval
# ----------------------------------------------------------------------------

class ApproveExpenseRequest(CamelModel):
    transaction_id: str
    action: Literal["approve", "reject"]
    comment: str | None = Field(None, max_length=500)
    approver_name: str | None = Field(None, max_length=200)
    transactions: list[Transaction] = []


class ApproveExpenseOut(CamelModel):
    success: bool
    transaction_id: str
    status: Literal["approved", "rejected"]
    approved_at: dt.datetime
    approved_by: str
    message: str
