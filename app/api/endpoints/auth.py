"""
User endpoints for registration, login and session handling.

Implements cookie-based JWT sessions:
- POST /register: Create a new account and start a session
- POST /login: Authenticate and start a session
- GET /logout: Clear the session cookie
- GET /getuser: Current user profile
"""

import logging
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from app.core.cookies import clear_token, send_token
from app.core.database import get_db
from app.core.deps import get_current_user
from app.core.errors import APIError
from app.core.security import verify_password
from app.crud import user as user_crud
from app.models.user import User
from app.schemas.user import (
    UserRegisterRequest,
    UserLoginRequest,
    UserResponse,
    CurrentUserResponse,
)

router = APIRouter(prefix="/user", tags=["Users"])
logger = logging.getLogger(__name__)


@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(
    request: UserRegisterRequest,
    db: Session = Depends(get_db)
):
    """
    Register a new user account as Employer or Job Seeker.

    Sets the session cookie so the user is logged in immediately.
    """
    if not all([request.name, request.email, request.phone, request.password, request.role]):
        raise APIError("Please fill full form!", 400)

    if user_crud.get_by_email(db, request.email):
        raise APIError("Email already registered!", 400)

    new_user = user_crud.create(
        db,
        name=request.name,
        email=request.email,
        phone=request.phone,
        password=request.password,
        role=request.role,
    )

    logger.info(f"New user registered: {new_user.email} ({new_user.role.value})")

    return send_token(new_user, status.HTTP_201_CREATED, "User Registered!")


@router.post("/login")
def login(
    request: UserLoginRequest,
    db: Session = Depends(get_db)
):
    """
    Authenticate with email, password and role.

    A correct password with the wrong role is rejected with 404 so an
    Employer cannot sign in through the Job Seeker form and vice versa.
    """
    if not request.email or not request.password or not request.role:
        raise APIError("Please provide email, password and role.", 400)

    user = user_crud.get_by_email(db, request.email)
    if not user or not verify_password(request.password, user.hashed_password):
        raise APIError("Invalid Email Or Password.", 400)

    if user.role is not request.role:
        raise APIError(f"User with provided email and {request.role.value} not found!", 404)

    logger.info(f"User logged in: {user.email}")

    return send_token(user, status.HTTP_200_OK, "User Logged In!")


@router.get("/logout")
def logout(current_user: User = Depends(get_current_user)):
    """Expire the session cookie."""
    response = JSONResponse(
        status_code=status.HTTP_200_OK,
        content={"success": True, "message": "Logged Out Successfully."},
    )
    logger.info(f"User logged out: {current_user.email}")
    return clear_token(response)


@router.get("/getuser", response_model=CurrentUserResponse)
def get_user(current_user: User = Depends(get_current_user)):
    """Get the current user's profile."""
    return CurrentUserResponse(user=UserResponse.model_validate(current_user))
