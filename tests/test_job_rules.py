"""
Unit tests for job listing business rules and duplicate detection.
"""

import pytest

from app.core.errors import APIError
from app.crud import job as job_crud
from app.models.job import Job, listing_fingerprint
from app.services.job_rules import validate_listing, validate_salary

LISTING = {
    "title": "Dev",
    "description": "Build X",
    "category": "Eng",
    "country": "US",
    "city": "NY",
    "location": "Office",
    "fixed_salary": 5000,
    "salary_from": None,
    "salary_to": None,
}


class TestSalaryRules:

    @pytest.mark.parametrize("fixed, low, high", [
        (5000, None, None),
        (None, 1000, 2000),
        # Fixed plus half a range is tolerated; only a full range conflicts
        (5000, 1000, None),
    ])
    def test_valid_shapes(self, fixed, low, high):
        validate_salary({"fixed_salary": fixed, "salary_from": low, "salary_to": high})

    @pytest.mark.parametrize("fixed, low, high", [
        (None, None, None),
        (None, 1000, None),
        (None, None, 2000),
        (0, 0, 0),
    ])
    def test_under_specified(self, fixed, low, high):
        with pytest.raises(APIError) as exc_info:
            validate_salary({"fixed_salary": fixed, "salary_from": low, "salary_to": high})

        assert exc_info.value.status_code == 400
        assert "either provide" in exc_info.value.message

    def test_over_specified(self):
        with pytest.raises(APIError) as exc_info:
            validate_salary({"fixed_salary": 5000, "salary_from": 1000, "salary_to": 2000})

        assert exc_info.value.status_code == 400
        assert exc_info.value.message == "Cannot Enter Fixed and Ranged Salary together."


class TestListingValidation:

    def test_complete_listing_passes(self):
        validate_listing(LISTING)

    def test_missing_details_checked_before_salary(self):
        with pytest.raises(APIError) as exc_info:
            validate_listing(dict(LISTING, title=None, fixed_salary=None))

        assert exc_info.value.message == "Please provide full job details."


class TestDuplicateDetection:

    @pytest.fixture
    def stored_job(self, db_session, employer):
        job = Job(**LISTING, posted_by=employer.id)
        db_session.add(job)
        db_session.commit()
        return job

    def test_exact_match_found(self, db_session, stored_job):
        assert job_crud.find_duplicate(db_session, dict(LISTING)).id == stored_job.id

    def test_null_fields_must_match(self, db_session, stored_job):
        values = dict(LISTING, salary_from=1000)

        assert job_crud.find_duplicate(db_session, values) is None

    def test_exclude_self(self, db_session, stored_job):
        assert job_crud.find_duplicate(db_session, dict(LISTING), exclude_id=stored_job.id) is None

    def test_dedupe_key_maintained(self, db_session, stored_job):
        assert stored_job.dedupe_key == listing_fingerprint(LISTING)

        stored_job.title = "Senior Dev"
        db_session.commit()

        assert stored_job.dedupe_key == listing_fingerprint(dict(LISTING, title="Senior Dev"))

    def test_storage_rejects_identical_listing(self, db_session, stored_job, other_employer):
        from sqlalchemy.exc import IntegrityError

        db_session.add(Job(**LISTING, posted_by=other_employer.id))

        with pytest.raises(IntegrityError):
            db_session.commit()
        db_session.rollback()
