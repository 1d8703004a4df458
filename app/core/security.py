"""
Security utilities for JWT session tokens and password hashing.

Session tokens are HS256-signed JWTs carrying the user id in ``sub``.
Passwords are hashed using bcrypt.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import jwt
from passlib.context import CryptContext
from app.core.config import Settings, settings as default_settings

# Password hashing context (bcrypt)
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against a hashed password."""
    # Bcrypt has a 72-byte limit - truncate if necessary
    password_bytes = plain_password.encode('utf-8')[:72]
    return pwd_context.verify(password_bytes, hashed_password)


def get_password_hash(password: str) -> str:
    """
    Hash a password using bcrypt.

    Note: Bcrypt has a 72-byte limit. Passwords longer than 72 bytes
    are automatically truncated to comply with this limitation.
    """
    password_bytes = password.encode('utf-8')[:72]
    return pwd_context.hash(password_bytes)


def create_access_token(
    data: dict,
    expires_delta: Optional[timedelta] = None,
    settings: Settings = default_settings
) -> str:
    """
    Create a signed session token.

    Args:
        data: Claims to encode (typically {"sub": user_id})
        expires_delta: Optional lifetime (default: JWT_EXPIRE_DAYS days)
        settings: Source of SECRET_KEY, ALGORITHM and JWT_EXPIRE_DAYS

    Returns:
        Encoded JWT token as a string
    """
    to_encode = data.copy()

    if expires_delta is None:
        expires_delta = timedelta(days=settings.JWT_EXPIRE_DAYS)

    to_encode.update({"exp": datetime.now(timezone.utc) + expires_delta})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_token(token: str, settings: Settings = default_settings) -> dict:
    """
    Decode and validate a JWT token.

    Raises:
        ExpiredSignatureError: If the token is expired
        JWTError: If the token is otherwise invalid
    """
    return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
