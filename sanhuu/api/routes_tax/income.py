"""
Income Tax Routes.

Handles quarterly and annual income tax return generation.
"""
from __future__ import annotations

import logging

from fastapi import APIRouter

from sanhuu.api.dependencies import CurrentUserDep
from sanhuu.models.schemas import IncomeTaxReportOut, IncomeTaxReportRequest
from sanhuu.services.income_tax_service import generate_income_tax_report

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/generate-income-tax-report", response_model=IncomeTaxReportOut)
def generate_income_tax_report_endpoint(
    payload: IncomeTaxReportRequest,
    current_user_id: CurrentUserDep,
):
    """Generate the income tax return for a quarter, or the full year when quarter is omitted."""
    logger.info(
        "Generating income tax report: year=%s quarter=%s user=%s",
        payload.year,
        payload.quarter,
        current_user_id,
    )
    return generate_income_tax_report(
        payload.year,
        payload.quarter,
        payload.transactions,
        payload.company_settings,
        payload.categories,
    )
