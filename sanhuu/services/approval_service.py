from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable

from sanhuu.core.exceptions import InvalidInputError, NotFoundError
from sanhuu.models.schemas import ApproveExpenseOut, Transaction

logger = logging.getLogger(__name__)

APPROVAL_ACTIONS = ("approve", "reject")


def approve_expense(
    transaction_id: str,
    action: str,
    transactions: Iterable[Transaction],
    approved_by: str,
    approved_at: datetime,
    comment: str | None = None,
) -> ApproveExpenseOut:
    """Record an approve/reject decision on an expense transaction.

    Only expenses can be approved; the decision is returned, not stored.
    """
    if action not in APPROVAL_ACTIONS:
        raise InvalidInputError(f"Үйлдэл буруу байна: {action}", field="action")
    transaction = next((t for t in transactions if t.id == transaction_id), None)
    if transaction is None:
        raise NotFoundError(transaction_id)
    if transaction.type != "expense":
        raise InvalidInputError("Зөвхөн зарлагын гүйлгээг батлах боломжтой", field="transactionId")

    if action == "approve":
        status = "approved"
        message = "Зарлага амжилттай батлагдлаа"
        if comment:
            message += f". Тайлбар: {comment}"
    else:
        status = "rejected"
        message = "Зарлага татгалзагдлаа"
        if comment:
            message += f". Шалтгаан: {comment}"

    logger.info("Expense %s %s by %s", transaction_id, status, approved_by)
    return ApproveExpenseOut(
        success=True,
        transaction_id=transaction_id,
        status=status,
        approved_at=approved_at,
        approved_by=approved_by,
        message=message,
    )
