"""
Planning engines.
"""

from .equivalence import EquivalenceNormalizer, normalize_code
from .offerings import OfferingResolver
from .scheduler import SemesterScheduler
from .ranking import RankingParser, parse_oracle_json, departments_for_role

__all__ = [
    "EquivalenceNormalizer",
    "normalize_code",
    "OfferingResolver",
    "SemesterScheduler",
    "RankingParser",
    "parse_oracle_json",
    "departments_for_role",
]
