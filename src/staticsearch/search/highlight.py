"""Keyword highlighting for matched records."""

from __future__ import annotations

import re
from typing import List, Optional

from staticsearch.models import AnnotatedRecord, MatchResult, Record
from staticsearch.search.matcher import FieldMatcher


class HighlightAnnotator:
    """Wraps every occurrence of a query in a start/end marker pair.

    Produces new :class:`AnnotatedRecord` objects and leaves the matched
    records untouched. A marker pair whose content is exactly one occurrence
    of the query is kept as is, so annotating an annotated record again does
    not nest markers. Occurrences inside any other marker pair (for instance
    marker-like text already present in the data) are still wrapped.

    An empty query highlights nothing: fields are copied verbatim.
    """

    def __init__(
        self,
        matcher: FieldMatcher | None = None,
        *,
        marker_start: str = "<mark>",
        marker_end: str = "</mark>",
    ) -> None:
        if not marker_start or not marker_end:
            raise ValueError("Markers must be non-empty strings")
        self.matcher = matcher or FieldMatcher()
        self.marker_start = marker_start
        self.marker_end = marker_end
        start, end = re.escape(marker_start), re.escape(marker_end)
        # Innermost pairs only: the content may not contain either marker.
        self._marked = re.compile(f"{start}((?:(?!{start}|{end}).)*){end}", re.DOTALL)

    def annotate(self, matches: MatchResult, query: str) -> List[AnnotatedRecord]:
        pattern = self._pattern_for(query)
        return [self._annotate_record(record, pattern) for record in matches]

    def highlight(self, text: str, query: str) -> str:
        """Highlight a single string."""
        return self._highlight(text, self._pattern_for(query))

    def _pattern_for(self, query: str) -> Optional[re.Pattern[str]]:
        if not query:
            return None
        return self.matcher.compile(query)

    def _annotate_record(self, record: Record, pattern: Optional[re.Pattern[str]]) -> AnnotatedRecord:
        return AnnotatedRecord({name: self._highlight(value, pattern) for name, value in record.items()})

    def _highlight(self, text: str, pattern: Optional[re.Pattern[str]]) -> str:
        if pattern is None or not text:
            return text

        def wrap(match: re.Match[str]) -> str:
            found = match.group(0)
            if not found:
                return found
            return f"{self.marker_start}{found}{self.marker_end}"

        parts: List[str] = []
        position = 0
        for span in self._marked.finditer(text):
            parts.append(pattern.sub(wrap, text[position : span.start()]))
            inner = span.group(1)
            if pattern.fullmatch(inner):
                parts.append(span.group(0))
            else:
                parts.append(f"{self.marker_start}{pattern.sub(wrap, inner)}{self.marker_end}")
            position = span.end()
        parts.append(pattern.sub(wrap, text[position:]))
        return "".join(parts)
