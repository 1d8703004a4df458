"""
Session cookie helpers.

The session token travels in an HttpOnly cookie so browser JavaScript
cannot read it.
"""

from datetime import datetime, timedelta, timezone

from fastapi.responses import JSONResponse

from app.core.config import Settings, settings as default_settings
from app.core.deps import SESSION_COOKIE
from app.core.security import create_access_token
from app.models.user import User
from app.schemas.user import UserResponse


def send_token(
    user: User,
    status_code: int,
    message: str,
    settings: Settings = default_settings
) -> JSONResponse:
    """
    Issue a session token for ``user`` and return it as cookie and body.

    Args:
        user: Authenticated user
        status_code: HTTP status for the response
        message: Human-readable message included in the body
        settings: Source of the signing key, token lifetime and cookie flags

    Returns:
        JSONResponse with body {success, user, message, token} and the
        ``token`` cookie set
    """
    token = create_access_token(data={"sub": str(user.id)}, settings=settings)

    response = JSONResponse(
        status_code=status_code,
        content={
            "success": True,
            "user": UserResponse.model_validate(user).model_dump(mode="json"),
            "message": message,
            "token": token,
        },
    )

    lifetime = timedelta(days=settings.COOKIE_EXPIRE_DAYS)
    response.set_cookie(
        key=SESSION_COOKIE,
        value=token,
        expires=datetime.now(timezone.utc) + lifetime,
        max_age=int(lifetime.total_seconds()),
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite="lax",
    )
    return response


def clear_token(response: JSONResponse, settings: Settings = default_settings) -> JSONResponse:
    """Expire the session cookie (logout)."""
    response.delete_cookie(
        key=SESSION_COOKIE,
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite="lax",
    )
    return response
