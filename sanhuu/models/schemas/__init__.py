"""Pydantic schemas for engine inputs and API requests/responses.

Sub-modules:
- transaction: Transaction, category and company settings records
- payroll: Salary input/result and payroll batch schemas
- reports: VAT, income tax, generic report, dashboard and approval schemas
"""
from .transaction import (
    UNCATEGORIZED,
    Category,
    CompanySettings,
    Transaction,
    TransactionType,
)

from .payroll import (
    PayrollRates,
    PayrollRequest,
    PayrollSummaryOut,
    SalaryInput,
    SalaryResult,
)

from .reports import (
    ApproveExpenseOut,
    ApproveExpenseRequest,
    CompanyInfo,
    DailyPoint,
    DashboardRequest,
    DashboardSummaryOut,
    ExpenseSection,
    GenericReportOut,
    GenericReportRequest,
    IncomeSection,
    IncomeTaxReportOut,
    IncomeTaxReportRequest,
    MonthlyBreakdownEntry,
    ReportPeriodOut,
    ReportSummary,
    TaxCalculation,
    VatCompanyInfo,
    VatPurchases,
    VatReportOut,
    VatReportRequest,
    VatSales,
    VatSummary,
    VatTransactionDetail,
    VatTransactionDetails,
)

__all__ = [
    # Records
    "UNCATEGORIZED",
    "Category",
    "CompanySettings",
    "Transaction",
    "TransactionType",
    # Payroll
    "PayrollRates",
    "PayrollRequest",
    "PayrollSummaryOut",
    "SalaryInput",
    "SalaryResult",
    # Reports
    "ApproveExpenseOut",
    "ApproveExpenseRequest",
    "CompanyInfo",
    "DailyPoint",
    "DashboardRequest",
    "DashboardSummaryOut",
    "ExpenseSection",
    "GenericReportOut",
    "GenericReportRequest",
    "IncomeSection",
    "IncomeTaxReportOut",
    "IncomeTaxReportRequest",
    "MonthlyBreakdownEntry",
    "ReportPeriodOut",
    "ReportSummary",
    "TaxCalculation",
    "VatCompanyInfo",
    "VatPurchases",
    "VatReportOut",
    "VatReportRequest",
    "VatSales",
    "VatSummary",
    "VatTransactionDetail",
    "VatTransactionDetails",
]
