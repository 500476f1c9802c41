"""Linear record filtering."""

from __future__ import annotations

import re

from staticsearch.models import Dataset, MatchResult, Record
from staticsearch.search.matcher import FieldMatcher


class RecordFilter:
    """Selects the records having at least one field that matches a query.

    Records are scanned in dataset order and returned by reference. No index
    is built and nothing is remembered between calls.
    """

    def __init__(self, matcher: FieldMatcher | None = None) -> None:
        self.matcher = matcher or FieldMatcher()

    def filter(self, dataset: Dataset, query: str) -> MatchResult:
        pattern = self.matcher.compile(query)
        if pattern is None:
            return []
        return [record for record in dataset if self._record_matches(record, pattern)]

    def _record_matches(self, record: Record, pattern: re.Pattern[str]) -> bool:
        # Fields are visited in the record's own key order; stop at the first hit.
        for name in record:
            if self.matcher.matches_compiled(record[name], pattern):
                return True
        return False
