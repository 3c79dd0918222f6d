import logging

from slowapi import Limiter
from slowapi.util import get_remote_address
from starlette.requests import Request

from sanhuu.core.config import settings

logger = logging.getLogger(__name__)


def get_user_identifier(request: Request) -> str:
    """Rate limit key: client address plus bearer token suffix when present.

    Callers behind one proxy address still get separate buckets per token.
    """
    ip_address = get_remote_address(request)
    auth_header = request.headers.get("Authorization", "")
    if auth_header.lower().startswith("bearer "):
        return f"{ip_address}:{auth_header[-16:]}"
    return ip_address


limiter = Limiter(
    key_func=get_user_identifier,
    default_limits=[settings.RATE_LIMIT_DEFAULT],
    storage_uri="memory://",
    enabled=settings.RATE_LIMIT_ENABLED,
)
logger.info(
    "Rate limiter initialized (enabled=%s, default=%s)",
    settings.RATE_LIMIT_ENABLED,
    settings.RATE_LIMIT_DEFAULT,
)
