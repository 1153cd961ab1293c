"""
Term catalog client.

This module queries the SFU Course Outlines REST API for the courses offered
in a given term. The service is slow and occasionally unavailable, so every
failure degrades to "no results" instead of raising.
"""

import logging

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..config import (
    CATALOG_BASE_URL,
    DEPARTMENTS_TIMEOUT,
    COURSES_TIMEOUT,
    CATALOG_RETRIES,
    CATALOG_BACKOFF,
)
from ..models import CatalogRecord, parse_term

log = logging.getLogger(__name__)


def create_retry_session(retries: int = CATALOG_RETRIES,
                         backoff: float = CATALOG_BACKOFF) -> requests.Session:
    """
    Session that retries GETs on 429/5xx with exponential backoff.

    Connection errors and read timeouts are not retried: a timed-out call
    fails once, and the caller treats it like any other failure.
    """
    session = requests.Session()
    retry = Retry(
        total=retries,
        connect=0,
        read=0,
        status=retries,
        backoff_factor=backoff,
        status_forcelist=[429, 500, 502, 503, 504],
        allowed_methods=["GET"],
    )
    adapter = HTTPAdapter(max_retries=retry)
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    session.headers.update({"Accept": "application/json"})
    return session


class TermCatalogClient:
    """
    Fetches a term's offerings from the catalog service.

    QUERY SHAPE:
    ------------
    1. GET {base}?{year}/{term}         -> [{value, text}, ...] departments
    2. GET {base}?{year}/{term}/{dept}  -> [{value, text}, ...] course numbers
       (one request per department)

    The result is the union of "{DEPT} {NUMBER}" across all departments that
    answered. A failed department is skipped; a failed department list means
    the whole term comes back empty. The caller cannot tell "catalog down"
    from "nothing offered", and doesn't need to: both go to the predictor.

    Usage:
        client = TermCatalogClient()
        offerings = client.fetch_offerings(2024, "fall")
    """

    def __init__(self, session: requests.Session = None, base_url: str = CATALOG_BASE_URL,
                 departments_timeout: float = DEPARTMENTS_TIMEOUT,
                 courses_timeout: float = COURSES_TIMEOUT):
        self.session = session or create_retry_session()
        self.base_url = base_url.rstrip("/")
        self.departments_timeout = departments_timeout
        self.courses_timeout = courses_timeout

    def _get_records(self, path: str, timeout: float) -> list:
        """GET {base}?{path} and return the CatalogRecords in the body."""
        resp = self.session.get(f"{self.base_url}?{path}", timeout=timeout)
        resp.raise_for_status()
        data = resp.json()
        if not isinstance(data, list):
            return []
        records = []
        for raw in data:
            record = CatalogRecord.from_raw(raw)
            if record is not None:
                records.append(record)
        return records

    def fetch_departments(self, year: int, term) -> list:
        """
        Lowercase department codes offered in the term.

        Raises requests.RequestException / ValueError on failure; see
        fetch_offerings for the swallowing wrapper.
        """
        term = parse_term(term)
        records = self._get_records(f"{year}/{term.value}", self.departments_timeout)
        return [r.resolved.lower() for r in records if r.resolved]

    def fetch_course_numbers(self, year: int, term, department: str) -> list:
        """Course numbers ("225", "105W") offered by one department in the term."""
        term = parse_term(term)
        records = self._get_records(
            f"{year}/{term.value}/{department.lower()}", self.courses_timeout
        )
        return [r.resolved for r in records if r.resolved]

    def fetch_offerings(self, year: int, term) -> list:
        """
        Every "{DEPT} {NUMBER}" offered in the term, de-duplicated, in fetch order.

        Never raises for network or payload problems; returns whatever was
        collected. A bad term name still raises ConfigurationError.
        """
        term = parse_term(term)
        try:
            departments = self.fetch_departments(year, term)
        except (requests.RequestException, ValueError) as e:
            log.warning("Catalog department list failed for %s-%s: %s", year, term.value, e,
                        extra={"event": "catalog_departments_failed",
                               "year": year, "term": term.value})
            return []

        courses = {}
        for dept in departments:
            try:
                numbers = self.fetch_course_numbers(year, term, dept)
            except (requests.RequestException, ValueError) as e:
                log.warning("Catalog fetch failed for %s in %s-%s: %s", dept.upper(), year,
                            term.value, e,
                            extra={"event": "catalog_department_failed", "year": year,
                                   "term": term.value, "department": dept})
                continue
            for number in numbers:
                courses.setdefault(f"{dept.upper()} {number}", None)

        log.info("Fetched %d offerings across %d departments for %s-%s",
                 len(courses), len(departments), year, term.value,
                 extra={"event": "catalog_fetched", "year": year, "term": term.value,
                        "count": len(courses)})
        return list(courses)
