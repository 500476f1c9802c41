"""Application configuration defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_DATA_SOURCE = "data/search.json"
DEFAULT_CACHE_KEY = "searchable-json-data"
DATA_SOURCE_ENV = "STATICSEARCH_DATA"


def _get_default_data_source() -> str:
    """Get the dataset location from the environment or the local default."""
    return os.environ.get(DATA_SOURCE_ENV) or DEFAULT_DATA_SOURCE


def is_remote(source: str) -> bool:
    return source.startswith(("http://", "https://"))


@dataclass(frozen=True, slots=True)
class SearchConfig:
    """Options consumed by the search engine and the result renderer."""

    highlight_keywords: bool = True
    query_literal_mode: bool = True
    marker_start: str = "<mark>"
    marker_end: str = "</mark>"
    no_results_message: str = "Sorry no search results found"
    show_logo: bool = True
    result_template: str = "<p>{title}</p>"


@dataclass(slots=True)
class AppConfig:
    data_source: str | None = None
    cache_key: str = DEFAULT_CACHE_KEY
    timeout: float = 10.0
    search: SearchConfig = field(default_factory=SearchConfig)

    def __post_init__(self) -> None:
        if self.data_source is None:
            self.data_source = _get_default_data_source()

    def resolve_data_source(self, base_dir: Path | None = None) -> str:
        if self.data_source is None:
            self.data_source = _get_default_data_source()
        source = str(self.data_source)
        if is_remote(source):
            return source
        path = Path(source).expanduser()
        if path.is_absolute() or base_dir is None:
            return str(path)
        return str(base_dir / path)
