"""
Command-Line Interface for the Advising System.

This module provides the interactive CLI for the course planner.
It handles user input and orchestrates the display of results.

MODES:
------
1. PLAN: Schedule ranked course recommendations across future terms
2. WARM CACHE: Pre-fetch course offerings for a range of terms

NOTE: Don't run this file directly. Run from the project root:
    python3 -m advising
"""

import json
import logging

from .config import DATA_DIR, LOG_LEVEL, ConfigurationError
from .data import TranscriptParser
from .engines import RankingParser
from .models import PlanRequest, Semester, current_semester
from .planner import CoursePlanner
from .ui import TerminalDisplay


def run_plan(planner: CoursePlanner, transcript_path, ranking_path, pace: str = "normal",
             start: Semester = None):
    """
    Plan from a parsed transcript and a ranking oracle answer.

    Both files are the JSON the upstream oracles return. The ranking file may
    still carry its ```json fence.

    Returns:
        (TranscriptSummary, recommended courses, PlanResult); also printed
    """
    with open(transcript_path, "r", encoding="utf-8") as f:
        summary = TranscriptParser().parse(json.load(f))
    with open(ranking_path, "r", encoding="utf-8") as f:
        raw_ranking = f.read()

    taken = planner.normalizer.taken_from(summary.completed_codes)
    recommended = RankingParser().parse(raw_ranking, taken=taken)

    result = planner.plan(PlanRequest(
        completed_courses=summary.completed_codes,
        desired_courses=[c.course_code for c in recommended],
        pace=pace,
        total_credits_completed=summary.total_credits_completed,
        start=start,
        major=summary.student_major,
        recommended_courses=recommended,
    ))

    TerminalDisplay.print_student_info(
        summary.student_major, summary.completed_codes, summary.total_credits_completed
    )
    TerminalDisplay.print_recommendations(recommended)
    TerminalDisplay.print_semester_plan(result)
    TerminalDisplay.print_summary(result)
    return summary, recommended, result


def run_warm(planner: CoursePlanner, start: Semester, end: Semester):
    """Fetch every term from start through end into the cache and print a summary."""
    print(f"\n{TerminalDisplay.DIM}Fetching {start.label} through {end.label}..."
          f"{TerminalDisplay.RESET}")
    cache = planner.warm_cache(start, end)
    TerminalDisplay.print_cache_summary(cache)
    return cache


def _ask_semester(prompt: str, default: Semester) -> Semester:
    print(f"\n{TerminalDisplay.BOLD}{prompt}{TerminalDisplay.RESET}")
    try:
        year = int(input(f"  Year (e.g., {default.year}): ").strip())
        term = input("  Term (Spring/Summer/Fall): ").strip()
        return Semester.of(year, term)
    except (ValueError, EOFError):
        # ConfigurationError is a ValueError: a typo'd term falls back too
        print(f"  → Using default: {default.label}")
        return default


def _ask(prompt: str, default: str) -> str:
    try:
        answer = input(f"  {prompt} [{default}]: ").strip()
    except EOFError:
        answer = ""
    return answer or default


def main():
    """
    Command-line interface for the course planner.

    ═══════════════════════════════════════════════════════════════════════════
    AVAILABLE MODES
    ═══════════════════════════════════════════════════════════════════════════

    1. PLAN MODE:
       Reads a parsed transcript and the ranking oracle's answer, removes
       courses already satisfied, and schedules the rest term by term.

    2. WARM CACHE MODE:
       Fetches offerings for a range of terms so later plans hit the cache.

    ═══════════════════════════════════════════════════════════════════════════
    """
    logging.basicConfig(level=LOG_LEVEL)
    planner = CoursePlanner()

    # Welcome banner with mode selection
    print(f"\n{TerminalDisplay.BOLD}{TerminalDisplay.CYAN}")
    print("╔══════════════════════════════════════════════════════════════════╗")
    print("║         COURSE ADVISING SYSTEM                                   ║")
    print("║         Ranked recommendations → term-by-term plan               ║")
    print("╠══════════════════════════════════════════════════════════════════╣")
    print("║                                                                  ║")
    print("║  1. 📅 PLAN SEMESTERS - Schedule recommended courses            ║")
    print("║  2. 🔄 WARM CACHE     - Pre-fetch term offerings                ║")
    print("║                                                                  ║")
    print("╚══════════════════════════════════════════════════════════════════╝")
    print(f"{TerminalDisplay.RESET}")

    try:
        mode = input(f"{TerminalDisplay.BOLD}Select mode (1 or 2): {TerminalDisplay.RESET}").strip()
    except EOFError:
        mode = "1"

    now = current_semester()

    # =========================================================================
    #  MODE 2: WARM CACHE
    # =========================================================================
    if mode == "2":
        start = _ask_semester("First term to fetch:", now)
        end = _ask_semester("Last term to fetch:", start)
        run_warm(planner, start, end)
        return

    # =========================================================================
    #  MODE 1: PLAN
    # =========================================================================
    print(f"\n{TerminalDisplay.BOLD}Input files:{TerminalDisplay.RESET}")
    transcript_path = _ask("Parsed transcript JSON",
                           str(DATA_DIR / "example_parsed_transcript.json"))
    ranking_path = _ask("Ranking JSON", str(DATA_DIR / "example_ranking.json"))
    pace = _ask("Pace (normal/speedrun)", "normal")
    start = _ask_semester("Start planning from:", now)

    print(f"\n{TerminalDisplay.DIM}Resolving offerings...{TerminalDisplay.RESET}")
    try:
        run_plan(planner, transcript_path, ranking_path, pace=pace, start=start)
    except ConfigurationError as e:
        print(f"\n  {TerminalDisplay.RED}{e}{TerminalDisplay.RESET}")
    except (OSError, ValueError) as e:
        print(f"\n  {TerminalDisplay.RED}Could not read input: {e}{TerminalDisplay.RESET}")


if __name__ == "__main__":
    main()
