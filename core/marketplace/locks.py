"""Lock helpers shared by the marketplace stores."""

from __future__ import annotations

from contextlib import contextmanager
from threading import Lock
from typing import Iterator

from core.errors import StoreBusyError


@contextmanager
def guarded(lock: Lock, timeout: float, what: str) -> Iterator[None]:
    """Hold `lock` for the body, or raise StoreBusyError after `timeout` seconds."""
    if not lock.acquire(timeout=timeout):
        raise StoreBusyError(f"Timed out waiting for exclusive access to {what}")
    try:
        yield
    finally:
        lock.release()


class _Entry:
    __slots__ = ("lock", "users")

    def __init__(self) -> None:
        self.lock = Lock()
        self.users = 0


class KeyedLocks:
    """One lock per key, alive only while someone holds or waits for it.

    Operations on the same key serialize; different keys never contend
    beyond the brief table lookup. Entries are reference counted and dropped
    when the last user leaves, so the table never outgrows the number of
    in-flight operations.
    """

    def __init__(self, timeout: float = 5.0) -> None:
        self._timeout = timeout
        self._table_lock = Lock()
        self._entries: dict[str, _Entry] = {}

    def __len__(self) -> int:
        with self._table_lock:
            return len(self._entries)

    def _checkout(self, key: str) -> _Entry:
        with guarded(self._table_lock, self._timeout, "lock table"):
            entry = self._entries.get(key)
            if entry is None:
                entry = self._entries[key] = _Entry()
            entry.users += 1
            return entry

    def _checkin(self, key: str, entry: _Entry) -> None:
        with self._table_lock:
            entry.users -= 1
            if entry.users == 0:
                del self._entries[key]

    @contextmanager
    def hold(self, key: str) -> Iterator[None]:
        entry = self._checkout(key)
        try:
            with guarded(entry.lock, self._timeout, f"collectible {key}"):
                yield
        finally:
            self._checkin(key, entry)
