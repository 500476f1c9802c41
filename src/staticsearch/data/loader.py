"""Dataset acquisition: fetch once per session, then serve from the store."""

from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import Any, Dict, List, Optional

import httpx

from staticsearch.config import DEFAULT_CACHE_KEY, is_remote
from staticsearch.data.store import MemorySessionStore, SessionStore
from staticsearch.errors import DataUnavailable
from staticsearch.models import Dataset

LOGGER = logging.getLogger(__name__)


def normalize_record(item: Dict[str, Any]) -> Dict[str, str]:
    """Keep text fields, stringify scalars and drop everything else."""
    record: Dict[str, str] = {}
    for name, value in item.items():
        if isinstance(value, str):
            record[name] = value
        elif isinstance(value, bool):
            record[name] = "true" if value else "false"
        elif isinstance(value, (int, float)):
            record[name] = str(value)
    return record


def parse_dataset(raw: str, *, source: str) -> List[Dict[str, str]]:
    """Decode the JSON text of a searchable dataset."""
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise DataUnavailable(source, f"invalid JSON: {exc}") from exc

    if not isinstance(payload, list):
        raise DataUnavailable(source, "expected a JSON array of objects")
    if not all(isinstance(item, dict) for item in payload):
        raise DataUnavailable(source, "every dataset entry must be a JSON object")
    return [normalize_record(item) for item in payload]


class DatasetLoader:
    """Loads the searchable dataset from a URL or a local JSON file.

    The raw JSON text is kept in ``store`` under ``cache_key`` so the source is
    contacted at most once per session. Repeated calls to :meth:`load` return
    the same dataset object.
    """

    def __init__(
        self,
        source: str,
        store: Optional[SessionStore] = None,
        *,
        cache_key: str = DEFAULT_CACHE_KEY,
        timeout: float = 10.0,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self.source = source
        self.store = store if store is not None else MemorySessionStore()
        self.cache_key = cache_key
        self.timeout = timeout
        self._client = client
        self._dataset: Optional[Dataset] = None
        # Serializes first loads coming from worker threads.
        self._lock = threading.Lock()

    def load(self) -> Dataset:
        with self._lock:
            if self._dataset is not None:
                return self._dataset

            raw = self.store.get(self.cache_key)
            if raw is not None:
                LOGGER.debug("Using cached dataset %s", self.cache_key)
            else:
                raw = self._fetch()

            try:
                dataset = parse_dataset(raw, source=self.source)
            except DataUnavailable as exc:
                LOGGER.error("%s", exc)
                self.store.delete(self.cache_key)
                raise

            self.store.set(self.cache_key, raw)
            self._dataset = dataset
            return dataset

    def invalidate(self) -> None:
        with self._lock:
            self._dataset = None
            self.store.delete(self.cache_key)

    def _fetch(self) -> str:
        LOGGER.info("Fetching searchable data from %s", self.source)
        if is_remote(self.source):
            return self._fetch_remote()
        return self._read_local()

    def _fetch_remote(self) -> str:
        try:
            if self._client is not None:
                response = self._client.get(self.source, timeout=self.timeout)
            else:
                with httpx.Client(timeout=self.timeout) as client:
                    response = client.get(self.source)
        except httpx.RequestError as exc:
            LOGGER.error("Request for %s failed: %s", self.source, exc)
            raise DataUnavailable(self.source, str(exc) or type(exc).__name__) from exc

        if not response.is_success:
            LOGGER.error("Fetching %s returned status %d", self.source, response.status_code)
            raise DataUnavailable(self.source, f"HTTP status {response.status_code}")
        return response.text

    def _read_local(self) -> str:
        path = Path(self.source).expanduser()
        try:
            return path.read_text(encoding="utf-8")
        except OSError as exc:
            LOGGER.error("Unable to read %s: %s", path, exc)
            raise DataUnavailable(self.source, str(exc)) from exc
