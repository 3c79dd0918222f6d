"""Dashboard summary endpoint."""

from __future__ import annotations

from datetime import date

from fastapi import APIRouter

from sanhuu.api.dependencies import CurrentUserDep
from sanhuu.models.schemas import DashboardRequest, DashboardSummaryOut
from sanhuu.services.analytics_service import dashboard_summary

router = APIRouter()


@router.post("/dashboard-summary", response_model=DashboardSummaryOut)
def get_dashboard_summary(
    payload: DashboardRequest,
    current_user_id: CurrentUserDep,
):
    """Totals, recent transactions and a daily income/expense series (default: last 7 days)."""
    return dashboard_summary(payload.transactions, payload.as_of or date.today(), payload.days)
