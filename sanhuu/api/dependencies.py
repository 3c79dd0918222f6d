"""Common request dependencies."""
import logging
from typing import Annotated, TypeAlias

from fastapi import Depends, Header

from sanhuu.core.exceptions import UnauthorizedError
from sanhuu.core.security import TokenExpiredError, TokenValidationError, decode_token

logger = logging.getLogger(__name__)


def get_current_user_id(authorization: str | None = Header(None)) -> str:
    """Resolve the caller identity from a bearer token.

    The host issues tokens; reports only need to know that the caller is
    authorized to see the data it supplied.
    """
    if not authorization or not authorization.lower().startswith("bearer "):
        logger.info("auth.token.parse failed: missing_token")
        raise UnauthorizedError("missing_token")
    token = authorization.split(" ", 1)[1]
    try:
        payload = decode_token(token)
    except TokenExpiredError as exc:
        logger.info("auth.token.expired")
        raise UnauthorizedError("expired") from exc
    except TokenValidationError as exc:
        logger.info("auth.token.invalid")
        raise UnauthorizedError("invalid") from exc
    return str(payload["sub"])


CurrentUserDep: TypeAlias = Annotated[str, Depends(get_current_user_id)]
