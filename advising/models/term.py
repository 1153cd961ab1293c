"""
Academic term models.

Contains the Term enum and the Semester dataclass that identify one
academic term, plus helpers for walking the three-term annual cycle.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional

from ..config import TERM_CYCLE, ConfigurationError


class Term(Enum):
    """
    The three SFU terms, in calendar order.

    SPRING: January - April
    SUMMER: May - August
    FALL: September - December
    """
    SPRING = "spring"
    SUMMER = "summer"
    FALL = "fall"

    @property
    def index(self) -> int:
        return TERM_CYCLE.index(self.value)

    @property
    def label(self) -> str:
        return self.value.capitalize()


def parse_term(name) -> Term:
    """
    Convert a term name ("Fall", "fall", Term.FALL) to a Term.

    Raises:
        ConfigurationError: if the name is not one of the three terms
    """
    if isinstance(name, Term):
        return name
    try:
        return Term(str(name).strip().lower())
    except ValueError:
        raise ConfigurationError(
            f"Unknown term {name!r}; expected one of {', '.join(TERM_CYCLE)}"
        ) from None


@dataclass(frozen=True)
class Semester:
    """
    One academic term, e.g. Fall 2024.

    Attributes:
        year: Calendar year the term runs in
        term: Term enum value
    """
    year: int
    term: Term

    @classmethod
    def of(cls, year: int, term) -> "Semester":
        return cls(int(year), parse_term(term))

    @property
    def key(self) -> str:
        """Canonical cache key, e.g. "2024-fall"."""
        return semester_key(self.year, self.term)

    @property
    def label(self) -> str:
        """Human-readable label, e.g. "Fall 2024"."""
        return f"{self.term.label} {self.year}"

    def next(self) -> "Semester":
        """The following term; Fall wraps to Spring of the next year."""
        idx = self.term.index + 1
        if idx >= len(TERM_CYCLE):
            return Semester(self.year + 1, Term(TERM_CYCLE[0]))
        return Semester(self.year, Term(TERM_CYCLE[idx]))

    def same_term_previous_year(self) -> "Semester":
        return Semester(self.year - 1, self.term)

    def __lt__(self, other: "Semester") -> bool:
        return (self.year, self.term.index) < (other.year, other.term.index)


def semester_key(year: int, term) -> str:
    return f"{int(year)}-{parse_term(term).value}"


def current_semester(today: Optional[date] = None) -> Semester:
    """SFU term by month: Spring Jan-Apr, Summer May-Aug, Fall Sep-Dec."""
    today = today or date.today()
    if today.month <= 4:
        term = Term.SPRING
    elif today.month <= 8:
        term = Term.SUMMER
    else:
        term = Term.FALL
    return Semester(today.year, term)


def list_semesters(start: Semester, count: int) -> list:
    """List `count` consecutive terms beginning with `start`."""
    out = []
    semester = start
    for _ in range(max(0, count)):
        out.append(semester)
        semester = semester.next()
    return out


def semesters_between(start: Semester, end: Semester) -> list:
    """All terms from `start` through `end` inclusive (empty if end < start)."""
    out = []
    semester = start
    while not end < semester:
        out.append(semester)
        semester = semester.next()
    return out
