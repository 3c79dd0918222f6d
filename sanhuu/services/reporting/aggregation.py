"""Transaction aggregation shared by every report.

Filters a transaction list to an inclusive date range and folds it into totals by
type, by category label and by calendar month. Sums stay exact ``Decimal``;
rounding is left to the report that presents them.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from functools import reduce
from typing import Dict, Iterable, List, Mapping, Optional

from sanhuu.models.schemas import UNCATEGORIZED, Category, Transaction
from sanhuu.utils.money import ZERO

from .period_utils import YearMonth, months_between

logger = logging.getLogger(__name__)

TRANSACTION_TYPES = ("income", "expense")


class RunningTotals(dict):
    """Key -> running sum. Missing keys read as zero."""

    def __missing__(self, key: str) -> Decimal:
        return ZERO

    def add(self, key: str, amount: Decimal) -> "RunningTotals":
        self[key] = self.get(key, ZERO) + amount
        return self

    @classmethod
    def seeded(cls, keys: Iterable[str]) -> "RunningTotals":
        return cls((key, ZERO) for key in keys)


@dataclass
class Aggregation:
    start: date
    end: date
    totals_by_type: RunningTotals
    by_category: Dict[str, RunningTotals]
    by_month: Dict[YearMonth, RunningTotals]
    transactions: List[Transaction] = field(default_factory=list)

    @property
    def total_income(self) -> Decimal:
        return self.totals_by_type["income"]

    @property
    def total_expense(self) -> Decimal:
        return self.totals_by_type["expense"]

    @property
    def net_profit(self) -> Decimal:
        return self.total_income - self.total_expense

    @property
    def transaction_count(self) -> int:
        return len(self.transactions)


def category_index(categories: Iterable[Category] | None) -> Dict[str, Category]:
    return {c.id: c for c in categories or ()}


def category_name(txn: Transaction, categories: Optional[Mapping[str, Category]] = None) -> Optional[str]:
    """Category name from the transaction itself or the catalog; None when unresolved."""
    if txn.category_name:
        return txn.category_name
    if categories and txn.category_id and txn.category_id in categories:
        return categories[txn.category_id].name
    return None


def category_label(txn: Transaction, categories: Optional[Mapping[str, Category]] = None) -> str:
    """Grouping label: the resolved name, or the Uncategorized bucket."""
    return category_name(txn, categories) or UNCATEGORIZED


def in_range(txn: Transaction, start: date, end: date) -> bool:
    return start <= txn.date <= end


def _empty(start: date, end: date) -> Aggregation:
    return Aggregation(
        start=start,
        end=end,
        totals_by_type=RunningTotals.seeded(TRANSACTION_TYPES),
        by_category={t: RunningTotals() for t in TRANSACTION_TYPES},
        by_month={ym: RunningTotals.seeded(TRANSACTION_TYPES) for ym in months_between(start, end)},
    )


def aggregate(
    transactions: Iterable[Transaction],
    start: date,
    end: date,
    categories: Optional[Mapping[str, Category]] = None,
) -> Aggregation:
    """Group transactions falling within [start, end] by type, category and month.

    Every month of the range is present in ``by_month`` even when no
    transaction falls in it. Input order is preserved in ``transactions``.
    """

    def fold(acc: Aggregation, txn: Transaction) -> Aggregation:
        if not in_range(txn, start, end):
            return acc
        acc.totals_by_type.add(txn.type, txn.amount)
        acc.by_category[txn.type].add(category_label(txn, categories), txn.amount)
        acc.by_month[(txn.date.year, txn.date.month)].add(txn.type, txn.amount)
        acc.transactions.append(txn)
        return acc

    result = reduce(fold, transactions, _empty(start, end))
    logger.debug(
        "Aggregated %d transactions for %s..%s: income=%s expense=%s",
        result.transaction_count,
        start,
        end,
        result.total_income,
        result.total_expense,
    )
    return result
