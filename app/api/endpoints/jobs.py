import logging
from uuid import UUID
from fastapi import APIRouter, Depends
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import get_current_employer, get_current_user
from app.core.errors import APIError
from app.crud import job as job_crud
from app.models.job import Job
from app.models.user import User
from app.schemas.job import (
    JobCreateRequest,
    JobUpdateRequest,
    JobResponse,
    JobListResponse,
    MyJobsResponse,
    JobPostResponse,
    SingleJobResponse,
    MessageResponse,
)
from app.services.job_rules import validate_listing

router = APIRouter(prefix="/job", tags=["Jobs"])
logger = logging.getLogger(__name__)

DUPLICATE_JOB = "Job already exist"
JOB_NOT_FOUND = "Oops! Job not found."


def _parse_id(job_id: str, message: str, status_code: int) -> UUID:
    try:
        return UUID(job_id)
    except ValueError:
        raise APIError(message, status_code)


def _get_owned_job(db: Session, job_id: str, employer: User) -> Job:
    """Load a job for modification by its owning Employer."""
    job = job_crud.get_by_id(db, _parse_id(job_id, JOB_NOT_FOUND, 400))
    if not job:
        raise APIError(JOB_NOT_FOUND, 400)
    if job.posted_by != employer.id:
        raise APIError("You are not allowed to modify this job.", 400)
    return job


@router.get("/getall", response_model=JobListResponse)
def get_all_jobs(db: Session = Depends(get_db)):
    """List every job that has not been marked expired."""
    jobs = job_crud.get_active(db)
    return JobListResponse(jobs=[JobResponse.model_validate(job) for job in jobs])


@router.post("/post", response_model=JobPostResponse)
def post_job(
    request: JobCreateRequest,
    employer: User = Depends(get_current_employer),
    db: Session = Depends(get_db)
):
    """
    Post a new job listing.

    Checks, in order:
    1. Caller is an Employer (dependency)
    2. All text fields are filled in
    3. Salary is either fixed or a full range, not both
    4. No identical listing exists

    The listing is stored with postedBy set to the caller.
    """
    values = request.model_dump()
    validate_listing(values)

    if job_crud.find_duplicate(db, values):
        raise APIError(DUPLICATE_JOB, 400)

    try:
        post = job_crud.create(db, values, posted_by=employer.id)
    except IntegrityError:
        # An identical listing was committed between the check and the insert
        db.rollback()
        raise APIError(DUPLICATE_JOB, 400)

    logger.info(f"Job {post.id} posted by {employer.id}: {post.title}")

    return JobPostResponse(message="Job posted successfully!", post=JobResponse.model_validate(post))


@router.get("/getmyjobs", response_model=MyJobsResponse)
def get_my_jobs(
    employer: User = Depends(get_current_employer),
    db: Session = Depends(get_db)
):
    """List every job posted by the calling Employer, expired ones included."""
    my_jobs = job_crud.get_by_poster(db, employer.id)
    return MyJobsResponse(my_jobs=[JobResponse.model_validate(job) for job in my_jobs])


@router.put("/update/{job_id}", response_model=JobPostResponse)
def update_job(
    job_id: str,
    request: JobUpdateRequest,
    employer: User = Depends(get_current_employer),
    db: Session = Depends(get_db)
):
    """
    Partially update a job listing.

    Only fields present in the body are changed. The merged listing is
    validated with the same rules as a new post before anything is saved.
    """
    job = _get_owned_job(db, job_id, employer)

    changes = request.model_dump(exclude_unset=True)
    if changes.get("expired") is None:
        changes.pop("expired", None)

    merged = {**job.listing_values(), **changes}
    validate_listing(merged)

    if job_crud.find_duplicate(db, merged, exclude_id=job.id):
        raise APIError(DUPLICATE_JOB, 400)

    try:
        job = job_crud.update(db, job, changes)
    except IntegrityError:
        db.rollback()
        raise APIError(DUPLICATE_JOB, 400)

    logger.info(f"Job {job.id} updated by {employer.id}: {sorted(changes)}")

    return JobPostResponse(message="Job updated successfully!", post=JobResponse.model_validate(job))


@router.delete("/delete/{job_id}", response_model=MessageResponse)
def delete_job(
    job_id: str,
    employer: User = Depends(get_current_employer),
    db: Session = Depends(get_db)
):
    job = _get_owned_job(db, job_id, employer)
    job_crud.delete(db, job)

    logger.info(f"Job {job_id} deleted by {employer.id}")
    return MessageResponse(message="Job deleted successfully!")


@router.get("/{job_id}", response_model=SingleJobResponse)
def get_single_job(
    job_id: str,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Retrieve a job by ID.

    A malformed id is reported as 404 "Invalid ID", an unknown one as
    404 "Job not found".
    """
    job = job_crud.get_by_id(db, _parse_id(job_id, "Invalid ID", 404))

    if not job:
        raise APIError("Job not found", 404)

    return SingleJobResponse(job=JobResponse.model_validate(job))
