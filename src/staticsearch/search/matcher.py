"""Per-field query matching."""

from __future__ import annotations

import logging
import re
from typing import Callable, Optional

from staticsearch.errors import InvalidQueryPattern

LOGGER = logging.getLogger(__name__)

Reporter = Callable[[InvalidQueryPattern], None]


class FieldMatcher:
    """Decides whether a single field value contains a query.

    In literal mode (the default) the query is searched for as plain text, so
    ``"C++"`` or ``"a.b"`` mean exactly what they say. In pattern mode the raw
    query is compiled as a regular expression, which reproduces the legacy
    widget behaviour; escaping is then the caller's responsibility. Both modes
    are case-insensitive.

    A query that does not compile in pattern mode is reported through
    ``reporter`` and then behaves as "no match" instead of raising.
    """

    def __init__(self, *, literal: bool = True, reporter: Optional[Reporter] = None) -> None:
        self.literal = literal
        self.reporter = reporter

    def compile(self, query: str) -> Optional[re.Pattern[str]]:
        source = re.escape(query) if self.literal else query
        try:
            return re.compile(source, re.IGNORECASE)
        except re.error as exc:
            error = InvalidQueryPattern(query, str(exc))
            LOGGER.warning("%s", error)
            if self.reporter is not None:
                self.reporter(error)
            return None

    def matches(self, field_value: str, query: str) -> bool:
        return self.matches_compiled(field_value, self.compile(query))

    @staticmethod
    def matches_compiled(field_value: str, pattern: Optional[re.Pattern[str]]) -> bool:
        if pattern is None:
            return False
        return pattern.search(field_value) is not None
