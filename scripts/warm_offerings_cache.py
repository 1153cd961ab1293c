"""
Pre-fetch SFU course offerings into the offerings cache.

Run before registration opens so planning requests hit the cache instead of
the catalog service:

    python scripts/warm_offerings_cache.py 2023 spring 2025 fall
"""

import logging
import sys

from advising import JsonCacheStore, OfferingResolver, Semester, TermCatalogClient
from advising.config import CACHE_PATH, LOG_LEVEL, ConfigurationError

# --- CONFIGURATION ---
DEFAULT_START = (2023, "spring")
DEFAULT_END = (2025, "fall")
# ---------------------


def run(start: Semester, end: Semester):
    resolver = OfferingResolver(TermCatalogClient(), JsonCacheStore(CACHE_PATH))
    cache = resolver.load_cache()

    print(f"📅 Range: {start.label} → {end.label}")
    print(f"📂 Cache: {CACHE_PATH}")

    before = set(cache.semesters)
    cache = resolver.warm(start, end, cache)

    for key in sorted(cache.semesters):
        count = len(cache.semesters[key])
        marker = "✔️" if count else "∅"
        fresh = "" if key in before else " (new)"
        print(f"   [{key} {marker} {count}]{fresh}")
    return cache


if __name__ == "__main__":
    logging.basicConfig(level=LOG_LEVEL)
    args = sys.argv[1:]
    try:
        if len(args) == 4:
            start = Semester.of(int(args[0]), args[1])
            end = Semester.of(int(args[2]), args[3])
        else:
            start = Semester.of(*DEFAULT_START)
            end = Semester.of(*DEFAULT_END)
    except (ValueError, ConfigurationError) as e:
        print(f"❌ {e}")
        sys.exit(2)

    print("🚀 Warming SFU offerings cache")
    print("-" * 60)
    run(start, end)
    print("-" * 60)
    print("✨ Done.")
