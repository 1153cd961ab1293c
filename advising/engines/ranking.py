"""
Ranking oracle intake.

The ranking itself is produced upstream by a generative-text oracle. This
module only reads its JSON answer and turns it into an ordered, de-duplicated
list of RecommendedCourse.
"""

import json
import logging
import re

from ..config import DEFAULT_DEPARTMENTS, ROLE_TO_DEPTS, TOP_N_RECOMMENDATIONS
from ..models import RecommendedCourse
from .equivalence import normalize_code

log = logging.getLogger(__name__)

_CODE_FENCE = re.compile(r"```json\n?|\n?```")

DEFAULT_REASON = "Relevant for your target role."


def parse_oracle_json(raw: str):
    """
    Decode an oracle answer, tolerating a Markdown ```json fence around it.

    Raises:
        ValueError: if what's left is not JSON
    """
    cleaned = _CODE_FENCE.sub("", raw or "").strip()
    return json.loads(cleaned)


def departments_for_role(role: str, oracle_answer=None) -> list:
    """
    Department codes to draw candidate courses from for a job role.

    Known roles come from ROLE_TO_DEPTS. Otherwise the oracle's answer (a
    JSON array of codes, possibly fenced) is used, and when that is missing,
    unparseable or empty the result is DEFAULT_DEPARTMENTS.
    """
    depts = ROLE_TO_DEPTS.get((role or "").strip().lower())
    if depts:
        return list(depts)

    codes = []
    parsed = oracle_answer
    if isinstance(oracle_answer, str):
        try:
            parsed = parse_oracle_json(oracle_answer)
        except ValueError as e:
            log.warning("Unparseable department answer for role %r: %s", role, e,
                        extra={"event": "role_departments_unparseable"})
            parsed = None
    if isinstance(parsed, list):
        codes = [s.strip().upper() for s in parsed if isinstance(s, str) and s.strip()]
    return codes or list(DEFAULT_DEPARTMENTS)


class RankingParser:
    """
    Reads the oracle's ranked course list.

    ACCEPTED SHAPES:
        {"courses": [{"course_code": "CMPT 225", "reason": "..."}, ...]}
        [{"course_code": "CMPT 225", "reason": "..."}, ...]

    Items without a course_code are ignored. A code is kept once (first
    occurrence), already-taken codes are skipped, and at most `top_n`
    courses survive. Anything unparseable yields an empty list.
    """

    def __init__(self, top_n: int = TOP_N_RECOMMENDATIONS):
        self.top_n = top_n

    def parse(self, raw, taken=frozenset(), titles=None) -> list:
        """
        Args:
            raw: Oracle answer, either a JSON string or already-decoded data
            taken: Normalized codes already satisfied
            titles: Optional {normalized code: course title}

        Returns:
            List of RecommendedCourse in ranked order
        """
        titles = titles or {}
        if isinstance(raw, str):
            try:
                raw = parse_oracle_json(raw)
            except ValueError as e:
                log.warning("Unparseable ranking response: %s", e,
                            extra={"event": "ranking_unparseable"})
                return []

        if isinstance(raw, dict):
            items = raw.get("courses")
        else:
            items = raw
        if not isinstance(items, list):
            return []

        recommended = []
        seen = set()
        for item in items[:self.top_n]:
            if not isinstance(item, dict) or "course_code" not in item:
                continue
            code = str(item.get("course_code") or "").strip()
            key = normalize_code(code)
            if not code or key in seen or key in taken:
                continue
            seen.add(key)
            reason = item.get("reason")
            recommended.append(RecommendedCourse(
                course_code=code,
                reason=reason if isinstance(reason, str) else DEFAULT_REASON,
                course_name=titles.get(key),
            ))
        return recommended
