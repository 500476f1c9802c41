"""StaticSearch - in-memory filtering and keyword highlighting for flat records."""

from __future__ import annotations

from staticsearch.config import SearchConfig
from staticsearch.errors import DataUnavailable, InvalidQueryPattern, StaticSearchError
from staticsearch.search.engine import SearchEngine, SearchOutcome

__all__ = [
    "DataUnavailable",
    "InvalidQueryPattern",
    "SearchConfig",
    "SearchEngine",
    "SearchOutcome",
    "StaticSearchError",
]
