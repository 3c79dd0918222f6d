import logging
import uuid

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from sanhuu.core.exceptions import InternalError, InvalidInputError, SanhuuException
from sanhuu.metrics import report_error_record

logger = logging.getLogger("sanhuu.errors")


def _describe_validation_error(exc: RequestValidationError) -> tuple[str, str | None]:
    errors = exc.errors()
    if not errors:
        return "Хүсэлтийн өгөгдөл буруу байна", None
    first = errors[0]
    location = [str(part) for part in first.get("loc", ()) if part != "body"]
    field = ".".join(location) or None
    message = first.get("msg", "invalid value")
    if field:
        return f"Хүсэлтийн өгөгдөл буруу байна: {field}: {message}", field
    return f"Хүсэлтийн өгөгдөл буруу байна: {message}", None


def register_error_handlers(app):
    @app.exception_handler(SanhuuException)
    async def domain_exception(request: Request, exc: SanhuuException):
        report_error_record(exc.code)
        logger.info("Rejected %s %s code=%s: %s", request.method, request.url.path, exc.code, exc.message)
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def validation_exception(request: Request, exc: RequestValidationError):
        message, field = _describe_validation_error(exc)
        error = InvalidInputError(message, field=field)
        report_error_record(error.code)
        return JSONResponse(status_code=error.status_code, content=error.to_dict())

    @app.exception_handler(Exception)
    async def unhandled_exception(request: Request, exc: Exception):  # noqa: BLE001
        correlation_id = uuid.uuid4().hex
        logger.exception("Unhandled error cid=%s path=%s method=%s", correlation_id, request.url.path, request.method)
        error = InternalError(correlation_id)
        report_error_record(error.code)
        return JSONResponse(status_code=error.status_code, content=error.to_dict())

    return app
