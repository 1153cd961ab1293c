"""
Offering cache storage.

This module persists the OfferingsCache between runs. Caching is purely an
optimization: a missing, corrupt or read-only cache file never stops a
planning request.
"""

import json
import logging
from pathlib import Path
from typing import Optional

from ..config import CACHE_PATH
from ..models import OfferingsCache

log = logging.getLogger(__name__)


class JsonCacheStore:
    """
    Reads and writes the offerings cache as a single JSON document.

    DOCUMENT SHAPE:
        {
            "lastUpdated": "2024-09-01T12:00:00.000Z",
            "semesters": {"2024-fall": ["CMPT 225", ...], ...}
        }

    read() returns None when the file is missing, unparseable, or has no
    "semesters" object. Callers treat None exactly like an empty cache.

    write() creates the parent directory if needed and reports success as a
    bool. It never raises: serverless filesystems are often read-only, and
    the plan is still correct without a cache.

    There is no locking. Two concurrent writers race and the last one wins,
    which is fine because entries for a past term never change.
    """

    def __init__(self, path=None):
        self.path = Path(path) if path is not None else CACHE_PATH

    def read(self) -> Optional[OfferingsCache]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            log.debug("No offerings cache at %s", self.path,
                      extra={"event": "cache_absent", "path": str(self.path)})
            return None
        except (OSError, ValueError) as e:
            log.warning("Ignoring unreadable offerings cache %s: %s", self.path, e,
                        extra={"event": "cache_read_failed", "path": str(self.path)})
            return None

        cache = OfferingsCache.from_dict(data)
        if cache is None:
            log.warning("Ignoring offerings cache %s without a semesters object", self.path,
                        extra={"event": "cache_malformed", "path": str(self.path)})
        return cache

    def write(self, cache: OfferingsCache) -> bool:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            payload = json.dumps(cache.to_dict(), indent=2)
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(payload)
        except (OSError, TypeError, ValueError) as e:
            log.warning("Offerings cache write failed (ignored) %s: %s", self.path, e,
                        extra={"event": "cache_write_failed", "path": str(self.path)})
            return False
        return True


class MemoryCacheStore:
    """
    In-process store with the same interface as JsonCacheStore.

    Useful for tests and for deployments with no writable disk. Holds a
    JSON-shaped copy so callers can't mutate the stored snapshot.
    """

    def __init__(self, cache: Optional[OfferingsCache] = None):
        self._data = cache.to_dict() if cache is not None else None
        self.writes = 0

    def read(self) -> Optional[OfferingsCache]:
        if self._data is None:
            return None
        return OfferingsCache.from_dict(self._data)

    def write(self, cache: OfferingsCache) -> bool:
        self._data = cache.to_dict()
        self.writes += 1
        return True
