"""Reporting primitives shared by every report generator.

Sub-modules:
- period_utils: Year/quarter/month selectors to date ranges and labels
- aggregation: Date filtering and grouping by type, category and month
- vat: VAT back-calculation for tax-inclusive amounts
- csv_export: CSV rendering with declared column lists
"""
from .aggregation import Aggregation, RunningTotals, aggregate, category_label, category_name
from .csv_export import ColumnSpec, render_csv
from .period_utils import ReportPeriod, month_label, period_from_dates, resolve_period
from .vat import VatSplit, decompose_for_company, decompose_vat

__all__ = [
    # Periods
    "ReportPeriod",
    "month_label",
    "period_from_dates",
    "resolve_period",
    # Aggregation
    "Aggregation",
    "RunningTotals",
    "aggregate",
    "category_label",
    "category_name",
    # VAT
    "VatSplit",
    "decompose_for_company",
    "decompose_vat",
    # CSV
    "ColumnSpec",
    "render_csv",
]
