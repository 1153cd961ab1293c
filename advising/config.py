"""
Configuration constants for the advising system.

This module contains all configuration values and constants used throughout
the offering cache and semester scheduler. Centralizing these makes it easy
to adjust behavior when the catalog service or degree policy changes.

Deployment-specific values (cache location, catalog URL, log level) can be
overridden with environment variables.
"""

import os
from pathlib import Path


class ConfigurationError(ValueError):
    """Raised for hard contract violations (unknown term name, unknown pace)."""


# =============================================================================
# FILE PATHS
# =============================================================================

# Package data directory (example transcript / ranking files)
BASE_DIR = Path(__file__).parent.parent
DATA_DIR = BASE_DIR / "data"

# The offerings cache lives under the working directory so that a deployed
# package can keep writing it even when site-packages is read-only.
CACHE_FILENAME = "sfu-offerings-cache.json"
CACHE_PATH = Path(
    os.environ.get("ADVISING_CACHE_PATH", Path.cwd() / "data" / CACHE_FILENAME)
)


# =============================================================================
# CATALOG SERVICE
# =============================================================================
# SFU Course Outlines REST API
#   GET {base}?{year}/{term}         -> departments offered that term
#   GET {base}?{year}/{term}/{dept}  -> course numbers for that department

CATALOG_BASE_URL = os.environ.get(
    "ADVISING_CATALOG_URL", "http://www.sfu.ca/bin/wcm/course-outlines"
)

# Seconds per request
DEPARTMENTS_TIMEOUT = 10
COURSES_TIMEOUT = 8

# Transport-level retries on 429/5xx (the adapter's, not ours)
CATALOG_RETRIES = 2
CATALOG_BACKOFF = 0.5


# =============================================================================
# TERM CYCLE
# =============================================================================
# SFU runs three terms a year, in this order:
#   Spring (Jan-Apr), Summer (May-Aug), Fall (Sep-Dec)

TERM_CYCLE = ("spring", "summer", "fall")

# 12 terms = 4 academic years
PLAN_HORIZON_TERMS = 12


# =============================================================================
# PACE PRESETS
# =============================================================================

COURSES_PER_SEMESTER_NORMAL = 3
COURSES_PER_SEMESTER_SPEEDRUN = 5

PACE_PRESETS = {
    "normal": COURSES_PER_SEMESTER_NORMAL,
    "speedrun": COURSES_PER_SEMESTER_SPEEDRUN,
}


# =============================================================================
# DEGREE POLICY
# =============================================================================

# Typical SFU bachelor's degree
DEGREE_TOTAL_CREDITS = 120

# How many ranked recommendations are kept from the ranking oracle
TOP_N_RECOMMENDATIONS = 10

# SFU BSc CS "pick one" groups and mutually exclusive courses.
# Completing ANY course in a group satisfies the whole group, so the
# alternatives are never recommended (no MATH 151 after MATH 150).
EQUIVALENCE_GROUPS = (
    ("MATH 150", "MATH 151", "MATH 154", "MATH 157"),  # Calculus I
    ("MATH 152", "MATH 155", "MATH 158"),              # Calculus II
    ("MATH 232", "MATH 240"),                          # Linear algebra
    ("STAT 270", "STAT 271"),                          # Mutually exclusive
)


# =============================================================================
# ROLE -> DEPARTMENT MAPPING
# =============================================================================
# Common roles mapped to SFU department codes. Roles not listed here are
# sent to the ranking oracle for a department list.

ROLE_TO_DEPTS = {
    "software engineer": ["CMPT", "MATH", "MACM", "ENSC"],
    "data scientist": ["CMPT", "STAT", "MATH", "MACM"],
    "web developer": ["CMPT", "MATH"],
    "machine learning engineer": ["CMPT", "MATH", "STAT", "MACM"],
    "product manager": ["CMPT", "BUS", "ECON"],
    "data analyst": ["STAT", "MATH", "CMPT", "ECON"],
    "backend developer": ["CMPT", "MATH", "MACM"],
    "frontend developer": ["CMPT", "MATH"],
}

DEFAULT_DEPARTMENTS = ["CMPT", "MATH"]


# =============================================================================
# LOGGING
# =============================================================================

LOG_LEVEL = os.environ.get("ADVISING_LOG_LEVEL", "WARNING").upper()
