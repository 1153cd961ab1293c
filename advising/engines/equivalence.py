"""
Course code normalization and equivalence groups.

Course codes arrive in many spellings ("CMPT 120", "cmpt120", "CMPT  120").
Everything that compares codes goes through normalize_code first.
"""

import re

from ..config import EQUIVALENCE_GROUPS

_WHITESPACE = re.compile(r"\s+")
_DEPT_NUMBER = re.compile(r"^([A-Z]+)\s*(\d.*)$")


def normalize_code(code) -> str:
    """
    Canonical comparison form of a course code.

    "cmpt120" -> "CMPT 120", " math  151 " -> "MATH 151", "CMPT 105w" -> "CMPT 105W".
    Codes that don't look like DEPT + number come back uppercased with
    whitespace collapsed and are otherwise untouched.
    """
    s = _WHITESPACE.sub(" ", str(code or "")).strip().upper()
    match = _DEPT_NUMBER.match(s)
    if match:
        return f"{match.group(1)} {match.group(2)}"
    return s


class EquivalenceNormalizer:
    """
    Collapses "pick one" groups into a single taken signal.

    If a student completed ANY course in a group, every course in the group
    counts as taken, so the alternatives are never recommended or scheduled.
    Groups are meant to be disjoint; if a code sits in two groups, both
    groups are expanded.

    Usage:
        normalizer = EquivalenceNormalizer()
        taken = normalizer.expand_taken({"MATH 150"})
        # {"MATH 150", "MATH 151", "MATH 154", "MATH 157"}
    """

    def __init__(self, groups=EQUIVALENCE_GROUPS):
        self.groups = [frozenset(normalize_code(c) for c in group) for group in groups]

    def completed_set(self, codes) -> set:
        """Normalized set of completed codes; blanks dropped."""
        return {normalize_code(c) for c in codes if normalize_code(c)}

    def expand_taken(self, completed) -> set:
        """
        Completed codes plus every group member of any group they touch.

        `completed` must already be normalized (see completed_set).
        """
        completed = set(completed)
        out = set(completed)
        for group in self.groups:
            if group & completed:
                out |= group
        return out

    def taken_from(self, codes) -> set:
        return self.expand_taken(self.completed_set(codes))

    def filter_untaken(self, desired, taken) -> list:
        """
        Desired codes not yet satisfied, ranking order kept, duplicates dropped.

        The first spelling of a duplicated code wins.
        """
        seen = set()
        out = []
        for code in desired:
            key = normalize_code(code)
            if not key or key in taken or key in seen:
                continue
            seen.add(key)
            out.append(code)
        return out
