from datetime import datetime, timezone

from fastapi import APIRouter

from sanhuu.api.dependencies import CurrentUserDep
from sanhuu.models import schemas
from sanhuu.services.approval_service import approve_expense

router = APIRouter()


@router.post("/approve-expense", response_model=schemas.ApproveExpenseOut)
def approve_expense_endpoint(
    payload: schemas.ApproveExpenseRequest,
    current_user_id: CurrentUserDep,
):
    """Approve or reject one of the supplied expense transactions."""
    return approve_expense(
        transaction_id=payload.transaction_id,
        action=payload.action,
        transactions=payload.transactions,
        approved_by=payload.approver_name or current_user_id,
        approved_at=datetime.now(timezone.utc),
        comment=payload.comment,
    )
