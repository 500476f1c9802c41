"""Session-scoped key/value stores for raw dataset bytes.

The loader only needs ``get``/``set``/``delete`` so any backend honouring the
:class:`SessionStore` protocol can be injected.
"""

from __future__ import annotations

from typing import Dict, Optional, Protocol


class SessionStore(Protocol):
    """Storage operations required by the dataset loader."""

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...

    def delete(self, key: str) -> None:
        ...


class MemorySessionStore:
    """Dict-backed store living as long as the process (one session)."""

    def __init__(self) -> None:
        self._items: Dict[str, str] = {}

    def get(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set(self, key: str, value: str) -> None:
        self._items[key] = value

    def delete(self, key: str) -> None:
        self._items.pop(key, None)

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __len__(self) -> int:
        return len(self._items)
