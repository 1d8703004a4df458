from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import List, Optional
from datetime import datetime
from uuid import UUID

# Salary columns are 32-bit integers
SALARY_MAX = 2**31 - 1


class CamelModel(BaseModel):
    """Base schema exposing camelCase JSON keys while accepting snake_case too"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class JobCreateRequest(CamelModel):
    """
    Schema for posting a new job.

    Every field is optional at the schema level; presence and salary shape
    are checked by the handler so the client gets a 400 with a readable
    message instead of a generic validation error.
    """
    title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    country: Optional[str] = None
    city: Optional[str] = None
    location: Optional[str] = None
    fixed_salary: Optional[int] = Field(None, ge=0, le=SALARY_MAX)
    salary_from: Optional[int] = Field(None, ge=0, le=SALARY_MAX)
    salary_to: Optional[int] = Field(None, ge=0, le=SALARY_MAX)


class JobUpdateRequest(JobCreateRequest):
    """Partial update; only fields present in the request body are applied"""
    expired: Optional[bool] = None


class JobResponse(CamelModel):
    """Schema for job response"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: UUID
    title: str
    description: str
    category: str
    country: str
    city: str
    location: str
    fixed_salary: Optional[int] = None
    salary_from: Optional[int] = None
    salary_to: Optional[int] = None
    expired: bool
    job_posted_on: Optional[datetime] = None
    posted_by: UUID


class JobListResponse(CamelModel):
    success: bool = True
    jobs: List[JobResponse]


class MyJobsResponse(CamelModel):
    success: bool = True
    my_jobs: List[JobResponse]


class JobPostResponse(CamelModel):
    """Returned by both post and update"""
    success: bool = True
    message: str
    post: JobResponse


class SingleJobResponse(CamelModel):
    success: bool = True
    job: JobResponse


class MessageResponse(CamelModel):
    success: bool = True
    message: str
