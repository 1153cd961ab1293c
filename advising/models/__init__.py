"""
Data models for the advising system.

This package contains all dataclasses and enums used throughout the system.
These serve as "contracts" between different parts of the system.
"""

from .term import (
    Term,
    Semester,
    parse_term,
    semester_key,
    current_semester,
    list_semesters,
    semesters_between,
)
from .offerings import CatalogRecord, OfferingsCache, utc_timestamp
from .plan import (
    RecommendedCourse,
    Resolution,
    SemesterPlanItem,
    PlanRequest,
    PlanResult,
)

__all__ = [
    # Term models
    "Term",
    "Semester",
    "parse_term",
    "semester_key",
    "current_semester",
    "list_semesters",
    "semesters_between",
    # Offering models
    "CatalogRecord",
    "OfferingsCache",
    "utc_timestamp",
    # Planning models
    "RecommendedCourse",
    "Resolution",
    "SemesterPlanItem",
    "PlanRequest",
    "PlanResult",
]
