import heapq
import threading
from datetime import datetime
from typing import Callable, Protocol

from tokengate.core.security import is_expired, utcnow


class TokenRepository(Protocol):
    """Set of refresh tokens that may still be redeemed."""

    def add(self, token: str, expires_at: datetime) -> None: ...

    def contains(self, token: str) -> bool: ...

    def discard(self, token: str) -> bool:
        """Remove ``token`` and return True only if this call removed it."""
        ...

    def purge_expired(self, now: datetime | None = None) -> int: ...

    def __len__(self) -> int: ...


class InMemoryTokenRepository:
    """
    Process-local active token set.

    Entries live in a dict keyed by token string. A min-heap ordered by expiry
    lets expired entries be dropped without scanning the whole set; heap items
    whose token was already discarded are skipped when popped, and the heap is
    rebuilt from the live entries once dead items outnumber them.
    """

    # Below this size a heap full of dead items is not worth rebuilding.
    COMPACT_MIN_SIZE = 64

    def __init__(self, clock: Callable[[], datetime] = utcnow):
        self.clock = clock
        self._lock = threading.Lock()
        self._tokens: dict[str, datetime] = {}
        self._expiries: list[tuple[datetime, str]] = []

    def add(self, token: str, expires_at: datetime) -> None:
        with self._lock:
            self._purge_locked(self.clock())
            if token in self._tokens:
                return
            self._tokens[token] = expires_at
            heapq.heappush(self._expiries, (expires_at, token))

    def contains(self, token: str) -> bool:
        with self._lock:
            return token in self._tokens

    def discard(self, token: str) -> bool:
        with self._lock:
            removed = self._tokens.pop(token, None) is not None
            if removed:
                self._compact_locked()
            return removed

    def purge_expired(self, now: datetime | None = None) -> int:
        with self._lock:
            return self._purge_locked(now or self.clock())

    def _purge_locked(self, now: datetime) -> int:
        purged = 0
        while self._expiries and is_expired(self._expiries[0][0], now):
            expires_at, token = heapq.heappop(self._expiries)
            if self._tokens.get(token) == expires_at:
                del self._tokens[token]
                purged += 1
        return purged

    def _compact_locked(self) -> None:
        if len(self._expiries) < self.COMPACT_MIN_SIZE or len(self._expiries) <= 2 * len(self._tokens):
            return
        self._expiries = [(expires_at, token) for token, expires_at in self._tokens.items()]
        heapq.heapify(self._expiries)

    def __len__(self) -> int:
        with self._lock:
            return len(self._tokens)
