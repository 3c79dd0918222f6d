"""Ad-hoc period report with category breakdowns and optional CSV export."""
from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Mapping, Optional

from sanhuu.metrics import report_generated_record, report_timer
from sanhuu.models.schemas import (
    Category,
    GenericReportOut,
    ReportPeriodOut,
    ReportSummary,
    Transaction,
)
from sanhuu.services.reporting.aggregation import RunningTotals, aggregate, category_index, category_name
from sanhuu.services.reporting.csv_export import ColumnSpec, render_csv
from sanhuu.services.reporting.period_utils import period_from_dates
from sanhuu.utils.money import cents

logger = logging.getLogger(__name__)

TYPE_LABELS = {"income": "Орлого", "expense": "Зарлага"}


def transaction_csv_columns(categories: Optional[Mapping[str, Category]] = None) -> list[ColumnSpec]:
    return [
        ("Огноо", lambda t: t.date),
        ("Төрөл", lambda t: TYPE_LABELS[t.type]),
        ("Дүн", lambda t: t.amount),
        ("Тайлбар", lambda t: t.description),
        ("Ангилал", lambda t: category_name(t, categories)),
        ("Баримтын дугаар", lambda t: t.document_no),
    ]


def transactions_csv(
    transactions: Iterable[Transaction],
    categories: Optional[Mapping[str, Category]] = None,
) -> str:
    return render_csv(transaction_csv_columns(categories), transactions, bom=True)


def csv_filename(report_type: str, start: date, end: date) -> str:
    return f"report-{report_type}-{start.isoformat()}-{end.isoformat()}.csv"


def _rounded(totals: RunningTotals) -> dict[str, float]:
    return {label: cents(amount) for label, amount in totals.items()}


def generate_report(
    report_type: str,
    start_date: date,
    end_date: date,
    transactions: Iterable[Transaction],
    fmt: str = "json",
    categories: Optional[Iterable[Category]] = None,
) -> GenericReportOut:
    """Summarize transactions in [start_date, end_date]; attach CSV text when fmt == "csv".

    Transactions keep the order they were supplied in.
    """
    period = period_from_dates(start_date, end_date)
    index = category_index(categories)

    with report_timer("generic"):
        agg = aggregate(transactions, period.start, period.end, index)
        report = GenericReportOut(
            report_type=report_type,
            period=ReportPeriodOut(start=period.start, end=period.end),
            summary=ReportSummary(
                total_income=cents(agg.total_income),
                total_expense=cents(agg.total_expense),
                net_profit=cents(agg.net_profit),
                transaction_count=agg.transaction_count,
            ),
            income_by_category=_rounded(agg.by_category["income"]),
            expense_by_category=_rounded(agg.by_category["expense"]),
            transactions=agg.transactions,
            csv_data=transactions_csv(agg.transactions, index) if fmt == "csv" else None,
        )

    report_generated_record("generic")
    logger.info(
        "Report generated: type=%s period=%s count=%d net_profit=%s",
        report_type,
        period.label,
        agg.transaction_count,
        agg.net_profit,
    )
    return report
