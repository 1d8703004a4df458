import hashlib
import json
import uuid
from sqlalchemy import Column, Integer, String, Boolean, DateTime, ForeignKey, Uuid, event, func
from sqlalchemy.orm import relationship
from app.core.database import Base

# Fields that identify a listing; two jobs with equal values here are duplicates
LISTING_FIELDS = (
    "title",
    "description",
    "category",
    "country",
    "city",
    "location",
    "fixed_salary",
    "salary_from",
    "salary_to",
)


def listing_fingerprint(values: dict) -> str:
    """SHA-256 over the listing fields; absent fields hash as null."""
    payload = json.dumps([values.get(field) for field in LISTING_FIELDS], separators=(",", ":"))
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()


class Job(Base):
    """
    Job listing posted by an Employer.

    Salary is either a single fixed figure or a (from, to) range.
    Listings with expired=True stay in the table but drop out of the
    public listing.
    """
    __tablename__ = "jobs"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4, index=True)
    title = Column(String, nullable=False, index=True)
    description = Column(String, nullable=False)
    category = Column(String, nullable=False, index=True)
    country = Column(String, nullable=False)
    city = Column(String, nullable=False)
    location = Column(String, nullable=False)

    fixed_salary = Column(Integer, nullable=True)
    salary_from = Column(Integer, nullable=True)
    salary_to = Column(Integer, nullable=True)

    expired = Column(Boolean, default=False, nullable=False, index=True)
    job_posted_on = Column(DateTime(timezone=True), server_default=func.now())

    posted_by = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    # Kept in sync by the before_insert/before_update listeners below.
    # The unique index makes the database reject a second identical listing.
    dedupe_key = Column(String(64), nullable=False, unique=True)

    # Relationships
    poster = relationship("User", back_populates="jobs")

    def listing_values(self) -> dict:
        return {field: getattr(self, field) for field in LISTING_FIELDS}

    def __repr__(self):
        return f"<Job(id={self.id}, title='{self.title}', expired={self.expired})>"


@event.listens_for(Job, "before_insert")
@event.listens_for(Job, "before_update")
def _refresh_dedupe_key(mapper, connection, target: Job) -> None:
    target.dedupe_key = listing_fingerprint(target.listing_values())
