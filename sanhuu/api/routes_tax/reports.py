"""
Period Report Routes.

Handles ad-hoc period reports and their CSV downloads.
"""
from __future__ import annotations

import logging

from fastapi import APIRouter, Response

from sanhuu.api.dependencies import CurrentUserDep
from sanhuu.models.schemas import GenericReportOut, GenericReportRequest
from sanhuu.services.report_service import csv_filename, generate_report

logger = logging.getLogger(__name__)
router = APIRouter()


def _build(payload: GenericReportRequest, fmt: str) -> GenericReportOut:
    return generate_report(
        payload.report_type,
        payload.start_date,
        payload.end_date,
        payload.transactions,
        fmt,
        payload.categories,
    )


@router.post("/generate-report", response_model=GenericReportOut)
def generate_report_endpoint(
    payload: GenericReportRequest,
    current_user_id: CurrentUserDep,
):
    """Summarize a date range by type and category; include CSV text when format=csv."""
    logger.info(
        "Generating report: type=%s %s..%s format=%s user=%s",
        payload.report_type,
        payload.start_date,
        payload.end_date,
        payload.format,
        current_user_id,
    )
    return _build(payload, payload.format)


@router.post("/generate-report/csv")
def download_report_csv(
    payload: GenericReportRequest,
    current_user_id: CurrentUserDep,
) -> Response:
    """Same report as a downloadable UTF-8 (BOM) CSV file."""
    report = _build(payload, "csv")
    filename = csv_filename(payload.report_type, payload.start_date, payload.end_date)
    return Response(
        content=(report.csv_data or "").encode("utf-8"),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
