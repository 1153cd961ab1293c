import pytest

from advising import MemoryCacheStore, OfferingResolver, OfferingsCache


class FakeCatalogClient:
    """Serves offerings from a {"2024-fall": [...]} dict and records every call."""

    def __init__(self, offerings=None):
        self.offerings = offerings or {}
        self.calls = []

    def fetch_offerings(self, year, term):
        self.calls.append((year, term))
        return list(self.offerings.get(f"{year}-{term}", []))


@pytest.fixture
def fake_client():
    return FakeCatalogClient()


@pytest.fixture
def memory_store():
    return MemoryCacheStore()


@pytest.fixture
def resolver(fake_client, memory_store):
    return OfferingResolver(fake_client, memory_store)


@pytest.fixture
def empty_cache():
    return OfferingsCache(last_updated="2024-01-01T00:00:00.000Z", semesters={})
