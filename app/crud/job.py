"""
CRUD operations for Job model.

Implements the Repository pattern to encapsulate all database operations
for job listings, providing a clean interface for the API layer.
"""

from typing import List, Optional
from uuid import UUID
from sqlalchemy.orm import Session
from app.models.job import Job, LISTING_FIELDS


def create(db: Session, values: dict, posted_by: UUID) -> Job:
    """
    Create a new job listing.

    Args:
        db: Database session
        values: Listing fields (see LISTING_FIELDS)
        posted_by: Id of the posting Employer

    Returns:
        Created Job instance with id

    Raises:
        IntegrityError: If an identical listing was committed concurrently
    """
    db_job = Job(**{field: values.get(field) for field in LISTING_FIELDS}, posted_by=posted_by)

    db.add(db_job)
    db.commit()
    db.refresh(db_job)

    return db_job


def get_by_id(db: Session, job_id: UUID) -> Optional[Job]:
    return db.query(Job).filter(Job.id == job_id).first()


def get_active(db: Session) -> List[Job]:
    """All listings that are not expired."""
    return db.query(Job).filter(Job.expired.is_(False)).all()


def get_by_poster(db: Session, user_id: UUID) -> List[Job]:
    return db.query(Job).filter(Job.posted_by == user_id).all()


def find_duplicate(db: Session, values: dict, exclude_id: Optional[UUID] = None) -> Optional[Job]:
    """
    Find a listing whose fields exactly match ``values``.

    Absent (None) fields only match absent fields, so a fixed-salary
    listing never matches a ranged one.

    Args:
        db: Database session
        values: Listing fields to compare
        exclude_id: Job to ignore (the one being updated)

    Returns:
        Matching Job if one exists, None otherwise
    """
    query = db.query(Job)
    for field in LISTING_FIELDS:
        column = getattr(Job, field)
        value = values.get(field)
        query = query.filter(column.is_(None) if value is None else column == value)

    if exclude_id is not None:
        query = query.filter(Job.id != exclude_id)

    return query.first()


def update(db: Session, job: Job, changes: dict) -> Job:
    """
    Apply a partial update to a job and persist it.

    Raises:
        IntegrityError: If the result collides with another listing
    """
    for field, value in changes.items():
        setattr(job, field, value)

    db.commit()
    db.refresh(job)

    return job


def delete(db: Session, job: Job) -> None:
    db.delete(job)
    db.commit()
