"""
VAT Routes.

Handles monthly VAT return generation.
"""
from __future__ import annotations

import logging

from fastapi import APIRouter

from sanhuu.api.dependencies import CurrentUserDep
from sanhuu.models.schemas import VatReportOut, VatReportRequest
from sanhuu.services.vat_service import generate_vat_report

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/generate-vat-report", response_model=VatReportOut)
def generate_vat_report_endpoint(
    payload: VatReportRequest,
    current_user_id: CurrentUserDep,
):
    """
    Generate the VAT return for a month.

    Income transactions are treated as sales and expense transactions as
    purchases; output minus input VAT gives the payable or refundable amount.
    """
    logger.info("Generating VAT report: year=%s month=%s user=%s", payload.year, payload.month, current_user_id)
    return generate_vat_report(
        payload.year,
        payload.month,
        payload.transactions,
        payload.company_settings,
        payload.categories,
    )
