import logging
import time
import uuid

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.middleware.cors import CORSMiddleware

from sanhuu.api.rate_limit import limiter
from sanhuu.api.routes_analytics import router as analytics_router
from sanhuu.api.routes_expense import router as expense_router
from sanhuu.api.routes_health import router as health_router
from sanhuu.api.routes_payroll import router as payroll_router
from sanhuu.api.routes_tax import router as tax_router
from sanhuu.core.config import settings
from sanhuu.core.errors import register_error_handlers
from sanhuu.core.exceptions import RateLimitExceededError
from sanhuu.core.logger import init_logging
from sanhuu.metrics import report_error_record

logger = logging.getLogger("sanhuu.http")

REQUEST_ID_HEADER = "X-Request-ID"


def security_headers() -> dict[str, str]:
    return {
        "Strict-Transport-Security": f"max-age={settings.HSTS_SECONDS}; includeSubDomains",
        "Referrer-Policy": "same-origin",
        "X-Frame-Options": "DENY",
        "X-Content-Type-Options": "nosniff",
        "Cache-Control": "no-store",
    }


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Tag every response with a request id and security headers; log the timing."""

    async def dispatch(self, request: Request, call_next):  # type: ignore[override]
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        started = time.perf_counter()
        response = await call_next(request)
        for header, value in security_headers().items():
            response.headers.setdefault(header, value)
        response.headers[REQUEST_ID_HEADER] = request_id
        logger.info(
            "%s %s -> %s",
            request.method,
            request.url.path,
            response.status_code,
            extra={"request_id": request_id, "elapsed_ms": round((time.perf_counter() - started) * 1000, 2)},
        )
        return response


async def _rate_limit_handler(request: Request, exc: RateLimitExceeded):
    error = RateLimitExceededError(str(exc.detail))
    report_error_record(error.code)
    logger.warning("Rate limit hit on %s: %s", request.url.path, exc.detail)
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


def create_app() -> FastAPI:
    init_logging()

    docs_enabled = settings.ENV.lower() != "prod"
    app = FastAPI(
        title=settings.APP_NAME,
        description="Payroll, VAT and income tax reporting",
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
    )

    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_handler)
    app.add_middleware(SlowAPIMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ALLOW_ORIGINS,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=settings.CORS_ALLOW_METHODS,
        allow_headers=settings.CORS_ALLOW_HEADERS,
        expose_headers=[REQUEST_ID_HEADER, "Content-Disposition"],
    )
    app.add_middleware(RequestContextMiddleware)
    register_error_handlers(app)

    for router, tags in (
        (payroll_router, ["payroll"]),
        (tax_router, None),
        (expense_router, ["expenses"]),
        (analytics_router, ["analytics"]),
        (health_router, None),
    ):
        app.include_router(router, tags=tags)

    return app


app = create_app()
