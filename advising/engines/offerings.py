"""
Offering resolution and prediction.

This module answers "what is offered in term X?" by layering the cache, the
catalog service and a prior-year prediction.
"""

import logging
from typing import Optional

from ..models import OfferingsCache, Resolution, Semester, semesters_between

log = logging.getLogger(__name__)


class OfferingResolver:
    """
    Resolves a term's offerings: cache first, then catalog, then prediction.

    ═══════════════════════════════════════════════════════════════════════════
    RESOLUTION ORDER
    ═══════════════════════════════════════════════════════════════════════════

    1. CACHE HIT: the term key is cached with a non-empty list -> return it,
       cache untouched, no network.
    2. FETCH: otherwise ask the catalog client, merge the (possibly empty)
       result into a COPY of the cache, persist best-effort, return both.
    3. PREDICT (resolve_with_prediction only): if the result is still empty,
       use the same term one year earlier from the updated cache.

    An empty cached list counts as a miss, same as a missing key. That means
    a term that truly has zero matching offerings is re-fetched and then
    predicted every time.

    The cache is a value passed in and handed back. The resolver keeps no
    copy of it, so concurrent requests never share state through here.

    ═══════════════════════════════════════════════════════════════════════════

    Usage:
        resolver = OfferingResolver(TermCatalogClient(), JsonCacheStore())
        cache = resolver.load_cache()
        result = resolver.resolve_with_prediction(2024, "fall", cache)
        cache = result.cache
    """

    def __init__(self, client, store):
        self.client = client
        self.store = store

    def load_cache(self) -> OfferingsCache:
        """The persisted cache, or a fresh empty one if there is none."""
        return self.store.read() or OfferingsCache()

    def resolve(self, year: int, term, cache: Optional[OfferingsCache] = None) -> tuple:
        """
        Offerings for one term.

        Returns:
            (offerings, cache) where cache is the input on a hit, or an
            updated copy after a fetch
        """
        semester = Semester.of(year, term)
        key = semester.key
        if cache is not None and cache.has_offerings(key):
            return cache.get(key), cache

        log.debug("Offerings cache miss for %s", key,
                  extra={"event": "offerings_cache_miss", "key": key})
        offerings = self.client.fetch_offerings(semester.year, semester.term.value)

        base = cache if cache is not None else OfferingsCache()
        updated = base.with_semester(key, offerings)
        # Best-effort; the in-memory cache is returned either way
        self.store.write(updated)
        return list(offerings), updated

    def predict(self, year: int, term, cache: Optional[OfferingsCache]) -> list:
        """
        Same term, previous year, straight from the cache.

        Never fetches, never mutates, never looks further back than one year.
        """
        if cache is None:
            return []
        previous = Semester.of(year, term).same_term_previous_year()
        return cache.get(previous.key)

    def resolve_with_prediction(self, year: int, term,
                                cache: Optional[OfferingsCache] = None) -> Resolution:
        offerings, updated = self.resolve(year, term, cache)
        if offerings:
            return Resolution(offerings=offerings, cache=updated, from_prediction=False)

        predicted = self.predict(year, term, updated)
        log.info("No offerings for %s-%s; predicted %d from prior year", year,
                 Semester.of(year, term).term.value, len(predicted),
                 extra={"event": "offerings_predicted", "year": year,
                        "count": len(predicted)})
        return Resolution(offerings=predicted, cache=updated, from_prediction=True)

    def warm(self, start: Semester, end: Semester,
             cache: Optional[OfferingsCache] = None) -> OfferingsCache:
        """
        Resolve every term from start through end inclusive.

        Useful before a term opens for registration, so planning requests hit
        the cache instead of the catalog.
        """
        cache = cache if cache is not None else self.load_cache()
        for semester in semesters_between(start, end):
            _, cache = self.resolve(semester.year, semester.term, cache)
        return cache
