"""
Terminal Display Implementation.

This module handles all console/terminal output formatting.
It's the ONLY place where printing happens in the advising package.

To create a different UI (web, JSON API), create a new class with
the same method signatures but different output handling.
"""

from ..models import PlanResult, RecommendedCourse, SemesterPlanItem


class TerminalDisplay:
    """
    Pretty terminal output for planning results.

    ═══════════════════════════════════════════════════════════════════════════
    HOW TO REPLACE THIS UI
    ═══════════════════════════════════════════════════════════════════════════

    1. FOR API RESPONSE:
       Skip the display entirely and return PlanResult.to_dict().

    2. FOR WEB UI:
       Create a WebDisplay class with the same method signatures.
       Instead of print(), return HTML or render templates.

    ═══════════════════════════════════════════════════════════════════════════
    """

    # ANSI color codes for terminal styling
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    CYAN = "\033[96m"
    WHITE = "\033[97m"

    BG_YELLOW = "\033[43m"

    @classmethod
    def print_header(cls, title: str):
        """Print a major section header with decorative borders."""
        width = 70
        print()
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}  {title}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")

    @classmethod
    def print_subheader(cls, title: str):
        """Print a subsection header."""
        print()
        print(f"{cls.BOLD}{cls.WHITE}  ── {title} ──{cls.RESET}")

    @classmethod
    def prediction_badge(cls, from_prediction: bool) -> str:
        if from_prediction:
            return f"{cls.BG_YELLOW}{cls.WHITE} PREDICTED {cls.RESET}"
        return ""

    @classmethod
    def print_student_info(cls, major: str, completed: list, total_credits):
        cls.print_header("STUDENT INFORMATION")
        print(f"  {cls.BOLD}Major:{cls.RESET} {major or 'Unknown'}")
        print(f"  {cls.BOLD}Completed courses:{cls.RESET} {len(completed)}")
        print(f"  {cls.BOLD}Credits completed:{cls.RESET} {total_credits}")

    @classmethod
    def print_recommendations(cls, recommended: list):
        """Print the ranked course list with the oracle's reasons."""
        cls.print_header("RECOMMENDED COURSES")
        if not recommended:
            print(f"  {cls.DIM}No recommendations.{cls.RESET}")
            return
        for rank, course in enumerate(recommended, 1):
            cls._print_recommended_course(rank, course)

    @classmethod
    def _print_recommended_course(cls, rank: int, course: RecommendedCourse):
        title = f" - {course.course_name}" if course.course_name else ""
        print(f"  {cls.BOLD}{rank:>2}. {course.course_code}{cls.RESET}{title}")
        print(f"      {cls.DIM}{course.reason}{cls.RESET}")

    @classmethod
    def print_semester_plan(cls, result: PlanResult):
        """Print the term-by-term plan in tabular format."""
        cls.print_header(f"SEMESTER PLAN ({result.courses_per_semester} COURSES PER TERM)")

        if not result.semester_plan:
            print(f"\n  {cls.YELLOW}Nothing could be scheduled in the planning horizon.{cls.RESET}")
        else:
            print(f"\n  {cls.BOLD}{'TERM':<14} {'COURSES':<44} {'SOURCE'}{cls.RESET}")
            print(f"  {cls.DIM}{'-' * 66}{cls.RESET}")
            for item in result.semester_plan:
                cls._print_plan_item(item)

        if result.unscheduled:
            cls.print_subheader("Not scheduled")
            print(f"  {cls.RED}{', '.join(result.unscheduled)}{cls.RESET}")
            print(f"  {cls.DIM}No matching offering found within the horizon.{cls.RESET}")

    @classmethod
    def _print_plan_item(cls, item: SemesterPlanItem):
        courses = ", ".join(item.courses)
        color = cls.YELLOW if item.from_prediction else cls.GREEN
        print(f"  {color}{item.label:<14}{cls.RESET} {courses:<44} "
              f"{cls.prediction_badge(item.from_prediction)}")

    @classmethod
    def print_summary(cls, result: PlanResult):
        cls.print_header("SUMMARY")
        print(f"  {cls.BOLD}Courses scheduled:{cls.RESET} "
              f"{result.scheduled_count} of {len(result.desired_courses)}")
        print(f"  {cls.BOLD}Credits completed:{cls.RESET} {result.total_credits_completed}")
        print(f"  {cls.BOLD}Credits remaining:{cls.RESET} {result.credits_remaining}")
        if any(item.from_prediction for item in result.semester_plan):
            print(f"\n  {cls.DIM}PREDICTED terms use last year's offerings for the same term;")
            print(f"  check the official schedule once it is published.{cls.RESET}")

    @classmethod
    def print_cache_summary(cls, cache):
        """Print how many courses are cached per term."""
        cls.print_header("OFFERINGS CACHE")
        print(f"  {cls.BOLD}Last updated:{cls.RESET} {cache.last_updated}")
        for key in sorted(cache.semesters):
            count = len(cache.semesters[key])
            color = cls.GREEN if count else cls.RED
            print(f"  {color}{key:<14}{cls.RESET} {count} course(s)")
