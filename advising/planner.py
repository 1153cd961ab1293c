"""
Course Planner - Main Orchestrator.

This module contains the CoursePlanner class that wires the cache store,
catalog client, resolver and scheduler together and answers a planning
request.

NOTE: Don't run this file directly. Run from the project root:
    python3 -m advising
"""

import logging

from .config import DEGREE_TOTAL_CREDITS, PACE_PRESETS, PLAN_HORIZON_TERMS, ConfigurationError
from .data import JsonCacheStore, TermCatalogClient
from .engines import EquivalenceNormalizer, OfferingResolver, SemesterScheduler, normalize_code
from .models import PlanRequest, PlanResult, current_semester

log = logging.getLogger(__name__)


def courses_per_semester(pace: str) -> int:
    """Per-term capacity for a pace preset ("normal" -> 3, "speedrun" -> 5)."""
    try:
        return PACE_PRESETS[(pace or "normal").strip().lower()]
    except KeyError:
        raise ConfigurationError(
            f"Unknown pace {pace!r}; expected one of {', '.join(PACE_PRESETS)}"
        ) from None


def credits_remaining(total_credits_completed) -> float:
    return max(0, DEGREE_TOTAL_CREDITS - (total_credits_completed or 0))


class CoursePlanner:
    """
    Main interface for the planning subsystem.

    ═══════════════════════════════════════════════════════════════════════════
    ROLE: ORCHESTRATOR
    ═══════════════════════════════════════════════════════════════════════════

    1. Expands the student's completed courses into a taken set
    2. Drops already-satisfied and duplicate courses from the ranked list
    3. Schedules what is left across the planning horizon
    4. Adds the credits summary

    Every collaborator can be swapped. Tests pass a MemoryCacheStore and a
    fake catalog client; a read-only deployment can pass MemoryCacheStore
    too.

    ═══════════════════════════════════════════════════════════════════════════

    USAGE:
        planner = CoursePlanner()
        result = planner.plan(PlanRequest(
            completed_courses=["CMPT 120", "MATH 150"],
            desired_courses=["CMPT 225", "MATH 151", "CMPT 295"],
            pace="normal",
            total_credits_completed=45,
        ))
        result.to_dict()
    """

    def __init__(self, store=None, client=None, horizon: int = PLAN_HORIZON_TERMS,
                 normalizer: EquivalenceNormalizer = None):
        self.store = store if store is not None else JsonCacheStore()
        self.client = client if client is not None else TermCatalogClient()
        self.resolver = OfferingResolver(self.client, self.store)
        self.scheduler = SemesterScheduler(self.resolver, horizon=horizon)
        self.normalizer = normalizer or EquivalenceNormalizer()

    def plan(self, request: PlanRequest) -> PlanResult:
        capacity = courses_per_semester(request.pace)
        start = request.start or current_semester()

        taken = self.normalizer.taken_from(request.completed_courses)
        desired = self.normalizer.filter_untaken(request.desired_courses, taken)

        semester_plan, cache = self.scheduler.schedule(
            desired, capacity, start.year, start.term
        )

        scheduled = {normalize_code(c) for item in semester_plan for c in item.courses}
        unscheduled = [c for c in desired if normalize_code(c) not in scheduled]
        kept = {normalize_code(c) for c in desired}
        recommended = []
        for course in request.recommended_courses:
            key = normalize_code(course.course_code)
            if key in kept:
                kept.discard(key)
                recommended.append(course)

        total = request.total_credits_completed or 0
        log.info("Planned %d of %d course(s) from %s", len(scheduled), len(desired),
                 start.label, extra={"event": "plan_built", "start": start.key})
        return PlanResult(
            desired_courses=desired,
            semester_plan=semester_plan,
            unscheduled=unscheduled,
            total_credits_completed=total,
            credits_remaining=credits_remaining(total),
            courses_per_semester=capacity,
            major=request.major,
            recommended_courses=recommended,
            cache=cache,
        )

    def warm_cache(self, start, end):
        """Fetch every term from start through end into the persisted cache."""
        return self.resolver.warm(start, end)
