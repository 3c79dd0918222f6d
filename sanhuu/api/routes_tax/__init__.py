"""
Tax & Report API Routes Module.

Sub-modules:
- vat: Monthly VAT return
- income: Quarterly/annual income tax return
- reports: Ad-hoc period reports and CSV downloads
"""
from __future__ import annotations

from fastapi import APIRouter

from .income import router as income_router
from .reports import router as reports_router
from .vat import router as vat_router

router = APIRouter(tags=["tax"])

router.include_router(vat_router)
router.include_router(income_router)
router.include_router(reports_router)

__all__ = ["router"]
