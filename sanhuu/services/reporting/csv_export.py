"""CSV serialization with an explicit, ordered column list.

Column order is part of the output contract, so every export declares its
columns as ``(header, getter)`` pairs instead of relying on dict key order.
"""
from __future__ import annotations

import csv
from datetime import date
from decimal import Decimal
from io import StringIO
from typing import Any, Callable, Iterable, Sequence, Tuple

from sanhuu.utils.money import format_amount

ColumnSpec = Tuple[str, Callable[[Any], Any]]

UTF8_BOM = "\ufeff"


def format_cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Decimal):
        return format_amount(value) or "0"
    if isinstance(value, (int, float)):
        return format_amount(Decimal(str(value))) or "0"
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def render_csv(columns: Sequence[ColumnSpec], rows: Iterable[Any], bom: bool = False) -> str:
    """Header row plus one line per row; cells with commas, quotes or newlines are quoted."""
    buf = StringIO()
    writer = csv.writer(buf, quoting=csv.QUOTE_MINIMAL, lineterminator="\n")
    writer.writerow([header for header, _ in columns])
    for row in rows:
        writer.writerow([format_cell(getter(row)) for _, getter in columns])
    text = buf.getvalue()
    return UTF8_BOM + text if bom else text
