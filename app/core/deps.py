"""
FastAPI dependencies for authentication and authorization.

These dependencies are used to protect endpoints and extract user context.
"""

from typing import Optional
from uuid import UUID

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import ExpiredSignatureError, JWTError
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.errors import APIError
from app.core.security import decode_token
from app.crud import user as user_crud
from app.models.user import User, UserRole

SESSION_COOKIE = "token"

# Bearer header is accepted as a fallback for non-browser clients
bearer = HTTPBearer(auto_error=False)


def _extract_token(request: Request, credentials: Optional[HTTPAuthorizationCredentials]) -> Optional[str]:
    token = request.cookies.get(SESSION_COOKIE)
    if token:
        return token
    if credentials:
        return credentials.credentials
    return None


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer),
    db: Session = Depends(get_db)
) -> User:
    """
    Resolve the current user from the session cookie.

    Raises:
        APIError 401: No token, or the token's user no longer exists
        APIError 400: Token expired or tampered with
    """
    token = _extract_token(request, credentials)
    if not token:
        raise APIError("User Not Authorized", 401)

    try:
        payload = decode_token(token)
    except ExpiredSignatureError:
        raise APIError("Json Web Token is expired, Try again!", 400)
    except JWTError:
        raise APIError("Json Web Token is invalid, Try again!", 400)

    try:
        user_id = UUID(str(payload.get("sub")))
    except ValueError:
        raise APIError("Json Web Token is invalid, Try again!", 400)

    user = user_crud.get_by_id(db, user_id)
    if user is None:
        raise APIError("User Not Authorized", 401)

    return user


async def get_current_employer(
    user: User = Depends(get_current_user),
) -> User:
    """
    Get the current user and ensure they may manage job listings.

    Raises:
        APIError 400: Job Seekers, or any role this gate does not know
    """
    if user.role is UserRole.EMPLOYER:
        return user
    if user.role is UserRole.JOB_SEEKER:
        raise APIError("Job Seeker not allowed to access this resource.", 400)
    raise APIError(f"Role {user.role!r} not allowed to access this resource.", 400)
