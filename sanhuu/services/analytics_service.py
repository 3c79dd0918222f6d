"""Dashboard summary metrics."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Iterable

from sanhuu.models.schemas import DailyPoint, DashboardSummaryOut, Transaction
from sanhuu.services.reporting.aggregation import RunningTotals
from sanhuu.utils.money import ZERO, cents

RECENT_TRANSACTIONS = 5


def dashboard_summary(
    transactions: Iterable[Transaction],
    as_of: date,
    days: int = 7,
) -> DashboardSummaryOut:
    """Lifetime totals, the latest transactions and a daily series ending at ``as_of``."""
    transactions = list(transactions)
    totals = RunningTotals.seeded(("income", "expense"))
    window_start = as_of - timedelta(days=days - 1)
    daily = {window_start + timedelta(days=i): RunningTotals.seeded(("income", "expense")) for i in range(days)}

    for txn in transactions:
        totals.add(txn.type, txn.amount)
        if txn.date in daily:
            daily[txn.date].add(txn.type, txn.amount)

    recent = sorted(transactions, key=lambda t: t.date, reverse=True)[:RECENT_TRANSACTIONS]

    return DashboardSummaryOut(
        total_income=cents(totals["income"]),
        total_expenses=cents(totals["expense"]),
        net_balance=cents(totals["income"] - totals["expense"]),
        recent_transactions=recent,
        daily=[
            DailyPoint(date=day, income=cents(sums["income"]), expenses=cents(sums["expense"]))
            for day, sums in daily.items()
        ],
    )
