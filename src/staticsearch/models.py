"""Core StaticSearch data models."""

from __future__ import annotations

from typing import Dict, Iterator, List, Mapping, Sequence

Record = Mapping[str, str]
Dataset = Sequence[Record]
MatchResult = List[Record]


class AnnotatedRecord(Mapping[str, str]):
    """Read-only copy of a matched record with highlighted field values.

    Owns its own storage: it is never a view over the source record.
    """

    __slots__ = ("_fields",)

    def __init__(self, fields: Mapping[str, str]) -> None:
        self._fields: Dict[str, str] = dict(fields)

    def __getitem__(self, key: str) -> str:
        return self._fields[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"AnnotatedRecord({self._fields!r})"

    def to_dict(self) -> Dict[str, str]:
        return dict(self._fields)
