"""
Transcript intake.

This module turns the transcript JSON produced by the text-extraction oracle
into the handful of facts the planner needs.
"""

import logging
from dataclasses import dataclass, field

from ..engines.equivalence import normalize_code

log = logging.getLogger(__name__)


@dataclass
class TranscriptSummary:
    """
    What the planner needs from a transcript.

    Attributes:
        student_major: Major as written on the transcript
        completed_codes: Completed course codes, first spelling kept
        total_credits_completed: Units earned so far
    """
    student_major: str
    completed_codes: list = field(default_factory=list)
    total_credits_completed: float = 0


class TranscriptParser:
    """
    Parses the oracle's transcript JSON.

    INPUT SHAPE:
        {
            "student_major": "Computer Science",
            "completed_courses": [{"code": "CMPT 120"}, ...],
            "total_credits_completed": 45
        }

    DUPLICATE HANDLING:
    Retaken courses appear more than once. Codes are compared in normalized
    form ("CMPT120" == "cmpt 120") and only the first spelling is kept.
    """

    def parse(self, transcript_data: dict) -> TranscriptSummary:
        major = str(transcript_data.get("student_major") or "").strip()

        seen = set()
        completed = []
        for entry in transcript_data.get("completed_courses") or []:
            code = entry.get("code") if isinstance(entry, dict) else None
            if not code:
                continue
            key = normalize_code(code)
            if key in seen:
                continue
            seen.add(key)
            completed.append(str(code).strip())

        credits = transcript_data.get("total_credits_completed")
        # bool is an int subclass; a True here is garbage, not one credit
        if not isinstance(credits, (int, float)) or isinstance(credits, bool):
            if credits is not None:
                log.info("Non-numeric total_credits_completed %r treated as 0", credits,
                         extra={"event": "transcript_credits_invalid"})
            credits = 0

        return TranscriptSummary(
            student_major=major,
            completed_codes=completed,
            total_credits_completed=credits,
        )
