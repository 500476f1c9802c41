"""High-level search API combining filtering and highlighting."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from staticsearch.config import SearchConfig
from staticsearch.errors import InvalidQueryPattern
from staticsearch.models import AnnotatedRecord, Dataset, MatchResult
from staticsearch.search.filter import RecordFilter
from staticsearch.search.highlight import HighlightAnnotator
from staticsearch.search.matcher import FieldMatcher

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class SearchOutcome:
    query: str
    matches: MatchResult
    annotated: List[AnnotatedRecord]
    highlighted: bool
    diagnostics: List[InvalidQueryPattern] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.matches)


class SearchEngine:
    """Runs a query against a dataset snapshot according to a SearchConfig."""

    def __init__(self, config: SearchConfig | None = None) -> None:
        self.config = config or SearchConfig()

    def search(self, dataset: Dataset, query: str) -> SearchOutcome:
        diagnostics: List[InvalidQueryPattern] = []
        matcher = FieldMatcher(literal=self.config.query_literal_mode, reporter=diagnostics.append)
        matches = RecordFilter(matcher).filter(dataset, query)

        if self.config.highlight_keywords and not diagnostics:
            annotator = HighlightAnnotator(
                matcher,
                marker_start=self.config.marker_start,
                marker_end=self.config.marker_end,
            )
            annotated = annotator.annotate(matches, query)
        else:
            annotated = [AnnotatedRecord(record) for record in matches]

        LOGGER.debug("Query %r matched %d of %d records", query, len(matches), len(dataset))
        return SearchOutcome(
            query=query,
            matches=matches,
            annotated=annotated,
            highlighted=self.config.highlight_keywords,
            diagnostics=diagnostics,
        )
