"""Period date range calculation utilities.

Turns a (year[, quarter | month]) selector into a concrete inclusive date range,
the list of months it covers, and a localized label for report headers.
"""
from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date
from typing import Optional, Tuple

from sanhuu.core.exceptions import InvalidPeriodError

MIN_YEAR = 1900
MAX_YEAR = 9999

YearMonth = Tuple[int, int]


@dataclass(frozen=True)
class ReportPeriod:
    """Resolved reporting window. Built only by the functions in this module."""
    start: date
    end: date
    label: str
    months: Tuple[YearMonth, ...]


def month_label(month: int) -> str:
    """Short month name as shown in monthly breakdowns, e.g. ``"3-р сар"``."""
    return f"{month}-р сар"


def last_day_of_month(year: int, month: int) -> date:
    return date(year, month, calendar.monthrange(year, month)[1])


def months_between(start: date, end: date) -> Tuple[YearMonth, ...]:
    """Every (year, month) touched by the inclusive range, in calendar order."""
    months = []
    year, month = start.year, start.month
    while (year, month) <= (end.year, end.month):
        months.append((year, month))
        year, month = (year + 1, 1) if month == 12 else (year, month + 1)
    return tuple(months)


def resolve_period(
    year: int,
    quarter: Optional[int] = None,
    month: Optional[int] = None,
) -> ReportPeriod:
    """Calculate the reporting window for a year, quarter or month.

    Args:
        year: Calendar year, required
        quarter: 1-4 for a quarterly window
        month: 1-12 for a monthly window

    Returns:
        ReportPeriod with inclusive start/end dates

    Raises:
        InvalidPeriodError: If a selector is outside its valid domain or
            both quarter and month are given
    """
    if isinstance(year, bool) or not isinstance(year, int) or not MIN_YEAR <= year <= MAX_YEAR:
        raise InvalidPeriodError(f"Он буруу байна: {year}", field="year")
    if quarter is not None and month is not None:
        raise InvalidPeriodError("Улирал болон сарыг зэрэг сонгох боломжгүй", field="quarter")

    if quarter is not None:
        if not 1 <= quarter <= 4:
            raise InvalidPeriodError(f"Улирал буруу байна: {quarter}", field="quarter")
        start_month = (quarter - 1) * 3 + 1
        end_month = quarter * 3
        start = date(year, start_month, 1)
        end = last_day_of_month(year, end_month)
        return ReportPeriod(start, end, f"{year} оны {quarter}-р улирал", months_between(start, end))

    if month is not None:
        if not 1 <= month <= 12:
            raise InvalidPeriodError(f"Сар буруу байна: {month}", field="month")
        start = date(year, month, 1)
        end = last_day_of_month(year, month)
        return ReportPeriod(start, end, f"{year} оны {month}-р сар", ((year, month),))

    start, end = date(year, 1, 1), date(year, 12, 31)
    return ReportPeriod(start, end, f"{year} он", months_between(start, end))


def period_from_dates(start: date, end: date) -> ReportPeriod:
    """Wrap an explicit date range (ad-hoc reports) in a ReportPeriod."""
    if start > end:
        raise InvalidPeriodError(
            f"Эхлэх огноо ({start.isoformat()}) дуусах огнооноос ({end.isoformat()}) хойно байна",
            field="startDate",
        )
    return ReportPeriod(start, end, f"{start.isoformat()} - {end.isoformat()}", months_between(start, end))
