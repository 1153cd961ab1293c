"""
Course Advising Package
=======================

Schedules ranked course recommendations across future academic terms,
based on when each course is actually offered.

ARCHITECTURE OVERVIEW
---------------------

┌─────────────────────────────────────────────────────────────────────────┐
│                         ALGORITHM LAYER                                  │
│        (Pure logic - returns data structures, NO UI/printing)           │
│                                                                         │
│  ┌──────────────────┐  ┌────────────────┐  ┌────────────────────────┐   │
│  │TermCatalogClient │  │ JsonCacheStore │  │ EquivalenceNormalizer  │   │
│  │ (SFU outlines)   │  │ (JSON file)    │  │ (pick-one groups)      │   │
│  └──────────────────┘  └────────────────┘  └────────────────────────┘   │
│                                                                         │
│  ┌─────────────────────────────┐  ┌─────────────────────────────────┐   │
│  │     OfferingResolver        │  │       SemesterScheduler         │   │
│  │ (cache → catalog → predict) │  │  (greedy term-by-term sweep)    │   │
│  └─────────────────────────────┘  └─────────────────────────────────┘   │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   │ Returns dataclasses
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                      PRESENTATION LAYER                                  │
│                        TerminalDisplay                                   │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                         CoursePlanner                                    │
│          (Orchestrator - taken-set filter, plan, credits summary)       │
└─────────────────────────────────────────────────────────────────────────┘

PACKAGE STRUCTURE
-----------------

advising/
├── __init__.py          # This file - main exports
├── config.py            # Configuration constants, ConfigurationError
├── planner.py           # CoursePlanner orchestrator
├── cli.py               # Command-line interface
│
├── models/              # Data classes and enums
│   ├── term.py          # Term, Semester, term-cycle helpers
│   ├── offerings.py     # OfferingsCache, CatalogRecord
│   └── plan.py          # SemesterPlanItem, PlanRequest, PlanResult, ...
│
├── data/                # External data
│   ├── catalog.py       # TermCatalogClient
│   ├── cache_store.py   # JsonCacheStore, MemoryCacheStore
│   └── transcript.py    # TranscriptParser
│
├── engines/             # Planning logic
│   ├── equivalence.py   # normalize_code, EquivalenceNormalizer
│   ├── offerings.py     # OfferingResolver (+ prediction)
│   ├── scheduler.py     # SemesterScheduler
│   └── ranking.py       # RankingParser
│
└── ui/
    └── terminal.py      # TerminalDisplay

USAGE
-----

    from advising import CoursePlanner, PlanRequest, Semester

    planner = CoursePlanner()
    result = planner.plan(PlanRequest(
        completed_courses=["CMPT 120", "MATH 150"],
        desired_courses=["CMPT 225", "CMPT 295", "MATH 240"],
        pace="normal",
        start=Semester.of(2024, "fall"),
    ))
    for item in result.semester_plan:
        print(item.label, item.courses)

Running from command line:

    python -m advising

"""

# Version
__version__ = "1.0.0"

# Main exports
from .planner import CoursePlanner, courses_per_semester, credits_remaining
from .cli import main

# Model exports
from .models import (
    Term,
    Semester,
    parse_term,
    semester_key,
    current_semester,
    list_semesters,
    semesters_between,
    CatalogRecord,
    OfferingsCache,
    RecommendedCourse,
    Resolution,
    SemesterPlanItem,
    PlanRequest,
    PlanResult,
)

# Engine exports
from .engines import (
    EquivalenceNormalizer,
    normalize_code,
    OfferingResolver,
    SemesterScheduler,
    RankingParser,
    parse_oracle_json,
    departments_for_role,
)

# Data exports
from .data import (
    TermCatalogClient,
    JsonCacheStore,
    MemoryCacheStore,
    TranscriptParser,
    TranscriptSummary,
)

# UI exports
from .ui import TerminalDisplay

# Configuration exports
from .config import (
    ConfigurationError,
    CACHE_PATH,
    CATALOG_BASE_URL,
    PLAN_HORIZON_TERMS,
    COURSES_PER_SEMESTER_NORMAL,
    COURSES_PER_SEMESTER_SPEEDRUN,
    DEGREE_TOTAL_CREDITS,
    EQUIVALENCE_GROUPS,
)

__all__ = [
    # Version
    "__version__",
    # Main entry points
    "CoursePlanner",
    "courses_per_semester",
    "credits_remaining",
    "main",
    # Models
    "Term",
    "Semester",
    "parse_term",
    "semester_key",
    "current_semester",
    "list_semesters",
    "semesters_between",
    "CatalogRecord",
    "OfferingsCache",
    "RecommendedCourse",
    "Resolution",
    "SemesterPlanItem",
    "PlanRequest",
    "PlanResult",
    # Engines
    "EquivalenceNormalizer",
    "normalize_code",
    "OfferingResolver",
    "SemesterScheduler",
    "RankingParser",
    "parse_oracle_json",
    "departments_for_role",
    # Data
    "TermCatalogClient",
    "JsonCacheStore",
    "MemoryCacheStore",
    "TranscriptParser",
    "TranscriptSummary",
    # UI
    "TerminalDisplay",
    # Config
    "ConfigurationError",
    "CACHE_PATH",
    "CATALOG_BASE_URL",
    "PLAN_HORIZON_TERMS",
    "COURSES_PER_SEMESTER_NORMAL",
    "COURSES_PER_SEMESTER_SPEEDRUN",
    "DEGREE_TOTAL_CREDITS",
    "EQUIVALENCE_GROUPS",
]
