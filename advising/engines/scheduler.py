"""
Semester scheduler.

This module spreads a ranked list of desired courses across future terms
according to when each course is offered.
"""

import logging
from typing import Optional

from ..config import PLAN_HORIZON_TERMS
from ..models import OfferingsCache, SemesterPlanItem, Semester, list_semesters
from .equivalence import normalize_code
from .offerings import OfferingResolver

log = logging.getLogger(__name__)


class SemesterScheduler:
    """
    Greedy term-by-term allocation of ranked courses.

    ALGORITHM:
    ----------
    Walk `horizon` consecutive terms from the start term. For each term,
    resolve its offerings (with prediction), keep the still-unscheduled
    desired courses that are offered, and take the earliest-ranked ones up
    to the per-term capacity. One linear sweep; earlier terms are never
    revisited.

    TIE-BREAK:
    ----------
    Always the caller's ranking order. Never alphabetical, never random.

    OUTCOMES:
    ---------
    - Terms with nothing to assign produce no plan item.
    - Courses still unscheduled when the horizon ends are left out of the
      plan. That is a normal result, not an error.
    - An empty desired list or a non-positive capacity gives an empty plan
      without touching the cache or the catalog.
    """

    def __init__(self, resolver: OfferingResolver, horizon: int = PLAN_HORIZON_TERMS):
        self.resolver = resolver
        self.horizon = horizon

    def build_plan(self, desired_codes: list, per_term_capacity: int, start_year: int,
                   start_term, cache: Optional[OfferingsCache] = None) -> list:
        """
        Build the semester plan.

        Args:
            desired_codes: Course codes, best-ranked first
            per_term_capacity: Maximum courses per term
            start_year: Year of the first term to consider
            start_term: "spring", "summer" or "fall" (Term also accepted)
            cache: Offerings snapshot; read from the resolver's store if None

        Returns:
            List of SemesterPlanItem in chronological order
        """
        plan, _ = self.schedule(desired_codes, per_term_capacity, start_year, start_term, cache)
        return plan

    def schedule(self, desired_codes: list, per_term_capacity: int, start_year: int,
                 start_term, cache: Optional[OfferingsCache] = None) -> tuple:
        """Same as build_plan, but also returns the updated offerings cache."""
        start = Semester.of(start_year, start_term)

        # Normalized code -> first display form, in ranking order
        remaining = {}
        for code in desired_codes:
            key = normalize_code(code)
            if key and key not in remaining:
                remaining[key] = code

        plan = []
        if not remaining or per_term_capacity <= 0:
            return plan, cache

        if cache is None:
            cache = self.resolver.load_cache()

        for semester in list_semesters(start, self.horizon):
            if not remaining:
                break
            resolution = self.resolver.resolve_with_prediction(
                semester.year, semester.term, cache
            )
            cache = resolution.cache

            offered = {normalize_code(o) for o in resolution.offerings}
            take = [key for key in remaining if key in offered][:per_term_capacity]
            if not take:
                continue

            plan.append(SemesterPlanItem(
                year=semester.year,
                term=semester.term.value,
                label=semester.label,
                courses=[remaining.pop(key) for key in take],
                from_prediction=resolution.from_prediction,
            ))

        if remaining:
            log.info("%d desired course(s) not scheduled within %d terms", len(remaining),
                     self.horizon,
                     extra={"event": "courses_unscheduled", "codes": list(remaining)})
        return plan, cache
