"""
Offering data models.

Contains the OfferingsCache snapshot that is passed into and returned from
every resolution call, and the CatalogRecord that absorbs the loose
{value, text} records returned by the catalog service.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

log = logging.getLogger(__name__)


def utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2024-09-01T12:00:00.000Z"""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass
class CatalogRecord:
    """
    One department or course-number record from the catalog service.

    The service returns records shaped like {"value": "cmpt", "text": "CMPT"},
    but either field may be missing. `value` is preferred, `text` is the
    fallback. Resolved once here so nothing past the client sees raw records.
    """
    value: Optional[str] = None
    text: Optional[str] = None

    @classmethod
    def from_raw(cls, raw) -> Optional["CatalogRecord"]:
        """Build a record from a decoded JSON item; None if it isn't an object."""
        if not isinstance(raw, dict):
            return None
        value = raw.get("value")
        text = raw.get("text")
        return cls(
            value=None if value is None else str(value),
            text=None if text is None else str(text),
        )

    @property
    def resolved(self) -> str:
        """The usable identifier, stripped; empty string if neither field is set."""
        chosen = self.value if self.value is not None else self.text
        return (chosen or "").strip()


@dataclass
class OfferingsCache:
    """
    Term-keyed snapshot of which courses are offered when.

    Attributes:
        last_updated: ISO-8601 timestamp of the last merge
        semesters: {"2024-fall": ["CMPT 225", ...], ...}

    A missing key means the term was never resolved. An empty list means it
    was resolved and came back empty. Course codes keep the form they were
    fetched in; comparisons normalize them.
    """
    last_updated: str = field(default_factory=utc_timestamp)
    semesters: dict = field(default_factory=dict)

    def get(self, key: str) -> list:
        return list(self.semesters.get(key) or [])

    def has_offerings(self, key: str) -> bool:
        return bool(self.semesters.get(key))

    def with_semester(self, key: str, offerings: list) -> "OfferingsCache":
        """
        Copy of this cache with `key` replaced and the timestamp refreshed.

        The receiver is never mutated.
        """
        semesters = dict(self.semesters)
        semesters[key] = list(offerings)
        return OfferingsCache(last_updated=utc_timestamp(), semesters=semesters)

    def to_dict(self) -> dict:
        return {
            "lastUpdated": self.last_updated,
            "semesters": {key: list(codes) for key, codes in self.semesters.items()},
        }

    @classmethod
    def from_dict(cls, data) -> Optional["OfferingsCache"]:
        """
        Rebuild a cache from its JSON document.

        Returns None when the document lacks a `semesters` object. Entries
        whose value is not a list are dropped.
        """
        if not isinstance(data, dict):
            return None
        raw_semesters = data.get("semesters")
        if not isinstance(raw_semesters, dict):
            return None

        semesters = {}
        for key, codes in raw_semesters.items():
            if not isinstance(codes, list):
                log.debug("Dropping malformed cache entry %s", key,
                          extra={"event": "cache_entry_malformed", "key": key})
                continue
            semesters[str(key)] = [str(c) for c in codes if isinstance(c, str)]

        last_updated = data.get("lastUpdated")
        if not isinstance(last_updated, str):
            last_updated = utc_timestamp()
        return cls(last_updated=last_updated, semesters=semesters)
