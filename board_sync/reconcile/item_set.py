"""Thread-safe set of item references."""

import threading
from collections.abc import Iterable, Iterator


class ConcurrentItemSet:
    """A set of item URLs that many worker threads may insert into.

    Every mutation and every read takes the internal lock, so callers never
    rely on the thread safety of the builtin ``set``. Reads return frozen
    snapshots; the live set is never handed out.
    """

    def __init__(self, items: Iterable[str] = ()):
        self._lock = threading.Lock()
        self._items: set[str] = set(items)

    def add(self, item: str) -> None:
        with self._lock:
            self._items.add(item)

    def update(self, items: Iterable[str]) -> None:
        """Insert a batch of items under a single lock acquisition."""
        batch = list(items)
        with self._lock:
            self._items.update(batch)

    def snapshot(self) -> frozenset[str]:
        with self._lock:
            return frozenset(self._items)

    def __contains__(self, item: object) -> bool:
        with self._lock:
            return item in self._items

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self.snapshot())

    def __repr__(self) -> str:
        return f"ConcurrentItemSet({len(self)} items)"
