from __future__ import annotations

from contextlib import contextmanager
from threading import Lock
from typing import Callable, Iterator

from core.marketplace.locks import guarded
from core.types import Transaction


class TransactionLog:
    """Append-only record of completed sales."""

    def __init__(self, *, lock_timeout: float = 5.0) -> None:
        self._timeout = lock_timeout
        self._lock = Lock()
        self._entries: list[Transaction] = []

    def _guard(self):
        return guarded(self._lock, self._timeout, "transaction log")

    def append(self, tx: Transaction) -> None:
        with self._guard():
            self._entries.append(tx)

    @contextmanager
    def hold(self) -> Iterator[Callable[[Transaction], None]]:
        """Hold the log for a multi-store write and yield an appender.

        Appending through the yielded callable cannot time out, so a caller
        that takes this first can finish its other writes knowing the log
        entry will land too.
        """
        with self._guard():
            yield self._entries.append

    def all(self) -> list[Transaction]:
        """All transactions in insertion order."""
        with self._guard():
            return list(self._entries)

    def count(self) -> int:
        with self._guard():
            return len(self._entries)

    def history_for(self, wallet: str) -> list[Transaction]:
        """Transactions where `wallet` was buyer or seller, oldest first."""
        with self._guard():
            return [tx for tx in self._entries if wallet in (tx.buyer, tx.seller)]

    def for_collectible(self, nft_id: str) -> list[Transaction]:
        with self._guard():
            return [tx for tx in self._entries if tx.nft_id == nft_id]

    def recent(self, n: int) -> list[Transaction]:
        """The `n` most recent transactions, newest first.

        Equal timestamps keep insertion order (later insert counts as newer).
        """
        if n <= 0:
            return []
        with self._guard():
            indexed = list(enumerate(self._entries))
        indexed.sort(key=lambda pair: (pair[1].timestamp, pair[0]), reverse=True)
        return [tx for _, tx in indexed[:n]]
