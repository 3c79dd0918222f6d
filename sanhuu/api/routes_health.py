from __future__ import annotations

from fastapi import APIRouter, Response

from sanhuu.metrics import render_latest

router = APIRouter(tags=["health"])


@router.get("/live")
async def live() -> dict[str, str]:
    """Liveness endpoint (no dependencies)."""
    return {"status": "alive"}


@router.get("/metrics")
def metrics_endpoint() -> Response:
    body, content_type = render_latest()
    return Response(body, media_type=content_type)
