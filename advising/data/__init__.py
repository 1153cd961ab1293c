"""
Data access: catalog service, cache storage, transcript intake.
"""

from .catalog import TermCatalogClient, create_retry_session
from .cache_store import JsonCacheStore, MemoryCacheStore
from .transcript import TranscriptParser, TranscriptSummary

__all__ = [
    "TermCatalogClient",
    "create_retry_session",
    "JsonCacheStore",
    "MemoryCacheStore",
    "TranscriptParser",
    "TranscriptSummary",
]
