"""
User model for authentication and role-based access.

Every user is either an Employer (posts and manages job listings) or a
Job Seeker (reads listings only).
"""

import enum
import uuid
from sqlalchemy import Column, String, DateTime, Enum, Uuid, func
from sqlalchemy.orm import relationship
from app.core.database import Base


class UserRole(str, enum.Enum):
    """
    Closed set of account roles.

    - EMPLOYER: may create, update and delete its own job listings
    - JOB_SEEKER: may only read listings
    """
    EMPLOYER = "Employer"
    JOB_SEEKER = "Job Seeker"


class User(Base):
    __tablename__ = "users"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4, index=True)

    # Profile
    name = Column(String(30), nullable=False)
    email = Column(String, unique=True, nullable=False, index=True)
    phone = Column(String, nullable=False)

    # Authentication credentials
    hashed_password = Column(String, nullable=False)
    role = Column(
        Enum(UserRole, name="user_role", values_callable=lambda roles: [r.value for r in roles]),
        nullable=False
    )

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    jobs = relationship("Job", back_populates="poster", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}', role={self.role.value})>"
