"""
CRUD operations for User model.
"""

import uuid
from typing import Optional
from sqlalchemy.orm import Session
from app.core.security import get_password_hash
from app.models.user import User, UserRole


def get_by_id(db: Session, user_id: uuid.UUID) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()


def get_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email).first()


def create(
    db: Session,
    name: str,
    email: str,
    phone: str,
    password: str,
    role: UserRole
) -> User:
    """
    Create a user with a bcrypt-hashed password.

    Args:
        db: Database session
        name: Display name
        email: Unique login e-mail
        phone: Contact phone number
        password: Plain-text password (hashed before storage)
        role: Employer or Job Seeker

    Returns:
        Created User instance
    """
    new_user = User(
        id=uuid.uuid4(),
        name=name,
        email=email,
        phone=phone,
        hashed_password=get_password_hash(password),
        role=role,
    )

    db.add(new_user)
    db.commit()
    db.refresh(new_user)

    return new_user
