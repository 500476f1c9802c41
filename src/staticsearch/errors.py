"""Error taxonomy shared by the search core and its collaborators."""

from __future__ import annotations


class StaticSearchError(Exception):
    """Base class for all StaticSearch errors."""


class InvalidQueryPattern(StaticSearchError, ValueError):
    """A query could not be compiled as a regular expression.

    Only raised in pattern mode. The matcher never lets it escape a filter or
    annotate pass: it is reported and the query degrades to "no match".
    """

    def __init__(self, query: str, reason: str) -> None:
        super().__init__(f"Invalid query pattern {query!r}: {reason}")
        self.query = query
        self.reason = reason


class DataUnavailable(StaticSearchError):
    """The searchable dataset could not be obtained from its source."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"Searchable data unavailable from {source}: {reason}")
        self.source = source
        self.reason = reason
