"""
Business rules for job listings.

A listing needs all of its descriptive text fields, and exactly one salary
representation: a fixed figure, or a full (from, to) range. Values are
judged by truthiness, so an empty string or a salary of 0 counts as absent.
"""

from app.core.errors import APIError

REQUIRED_TEXT_FIELDS = ("title", "description", "category", "country", "city", "location")

MISSING_DETAILS = "Please provide full job details."
MISSING_SALARY = "Please either provide fixed salary or ranged salary."
CONFLICTING_SALARY = "Cannot Enter Fixed and Ranged Salary together."


def _present(value) -> bool:
    if isinstance(value, str):
        return bool(value.strip())
    return bool(value)


def validate_required_fields(values: dict) -> None:
    if not all(_present(values.get(field)) for field in REQUIRED_TEXT_FIELDS):
        raise APIError(MISSING_DETAILS, 400)


def validate_salary(values: dict) -> None:
    fixed = _present(values.get("fixed_salary"))
    ranged = _present(values.get("salary_from")) and _present(values.get("salary_to"))

    if not fixed and not ranged:
        raise APIError(MISSING_SALARY, 400)
    if fixed and ranged:
        raise APIError(CONFLICTING_SALARY, 400)


def validate_listing(values: dict) -> None:
    """
    Check a complete listing (new, or an existing one merged with an update).

    Raises:
        APIError 400: on the first rule violated
    """
    validate_required_fields(values)
    validate_salary(values)
