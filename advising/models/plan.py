"""
Planning data models.

Contains dataclasses for the semester plan, the per-term resolution result,
and the planning request/response that the surrounding service exchanges
with the planner.
"""

from dataclasses import dataclass, field
from typing import Optional

from .offerings import OfferingsCache
from .term import Semester


@dataclass
class RecommendedCourse:
    """
    One course from the ranking oracle, in ranked order.
    """
    course_code: str                       # As the oracle spelled it (e.g. "CMPT 225")
    reason: str                            # One-sentence justification
    course_name: Optional[str] = None      # Title, when the catalog knows it

    def to_dict(self) -> dict:
        out = {"course_code": self.course_code, "reason": self.reason}
        if self.course_name:
            out["course_name"] = self.course_name
        return out


@dataclass
class Resolution:
    """
    Result of resolving one term's offerings.

    `cache` is the updated snapshot; callers thread it into the next call.
    `from_prediction` is True when authoritative data was empty and the
    prior year's same-term offerings were substituted.
    """
    offerings: list
    cache: OfferingsCache
    from_prediction: bool = False


@dataclass
class SemesterPlanItem:
    """
    One term in the plan and the courses assigned to it.

    Courses keep the display form from the desired list, in ranking order.
    """
    year: int
    term: str                              # "spring", "summer" or "fall"
    label: str                             # "Fall 2024"
    courses: list
    from_prediction: bool = False

    def to_dict(self) -> dict:
        return {
            "year": self.year,
            "term": self.term,
            "label": self.label,
            "courses": list(self.courses),
            "fromPrediction": self.from_prediction,
        }


@dataclass
class PlanRequest:
    """
    Planning request from the service layer.

    Attributes:
        completed_courses: Course codes the student has already completed
        desired_courses: Ranked course codes (best first)
        pace: "normal" (3 per term) or "speedrun" (5 per term)
        total_credits_completed: Credits already earned
        start: First term to plan; defaults to the current term
        major: Student's declared major, echoed in the result
        recommended_courses: RecommendedCourse list behind desired_courses
    """
    completed_courses: list
    desired_courses: list
    pace: str = "normal"
    total_credits_completed: float = 0
    start: Optional[Semester] = None
    major: str = ""
    recommended_courses: list = field(default_factory=list)


@dataclass
class PlanResult:
    """
    Planning response returned to the service layer.
    """
    desired_courses: list                  # Desired list after taken/duplicate filtering
    semester_plan: list                    # List of SemesterPlanItem
    unscheduled: list                      # Desired courses the horizon could not fit
    total_credits_completed: float
    credits_remaining: float
    courses_per_semester: int
    major: str = ""
    recommended_courses: list = field(default_factory=list)   # RecommendedCourse, still untaken
    cache: Optional[OfferingsCache] = field(default=None, repr=False)

    @property
    def scheduled_count(self) -> int:
        return sum(len(item.courses) for item in self.semester_plan)

    def to_dict(self) -> dict:
        return {
            "major": self.major,
            "recommended_courses": [c.to_dict() for c in self.recommended_courses],
            "desired_courses": list(self.desired_courses),
            "semester_plan": [item.to_dict() for item in self.semester_plan],
            "unscheduled": list(self.unscheduled),
            "total_credits_completed": self.total_credits_completed,
            "credits_remaining": self.credits_remaining,
            "courses_per_semester": self.courses_per_semester,
        }
