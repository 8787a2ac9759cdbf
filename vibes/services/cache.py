from __future__ import annotations

import asyncio
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Generic, TypeVar

T = TypeVar("T")

Clock = Callable[[], float]


@dataclass(frozen=True)
class CacheEntry(Generic[T]):
    data: T
    timestamp: float


@dataclass
class TtlSlot(Generic[T]):
    """A single memoized value that expires ``ttl`` after it was stored.

    ``get_or_compute`` runs at most one computation at a time; callers that
    miss while a computation is in flight wait for it and share its result.
    """

    ttl: timedelta
    clock: Clock = time.monotonic
    _entry: CacheEntry[T] | None = field(default=None, init=False, repr=False)
    _lock: asyncio.Lock = field(default_factory=asyncio.Lock, init=False, repr=False)

    @property
    def entry(self) -> CacheEntry[T] | None:
        return self._entry

    def age(self) -> float | None:
        if self._entry is None:
            return None
        return self.clock() - self._entry.timestamp

    def remaining(self) -> float | None:
        age = self.age()
        if age is None:
            return None
        return max(0.0, self.ttl.total_seconds() - age)

    def get(self) -> T | None:
        """Return the stored value if it is still fresh."""
        age = self.age()
        if self._entry is None or age is None or age >= self.ttl.total_seconds():
            return None
        return self._entry.data

    def set(self, data: T) -> CacheEntry[T]:
        self._entry = CacheEntry(data=data, timestamp=self.clock())
        return self._entry

    def clear(self) -> None:
        self._entry = None

    async def get_or_compute(self, factory: Callable[[], Awaitable[T]]) -> tuple[T, bool]:
        """Return ``(value, hit)``, computing and storing the value on a miss."""
        cached = self.get()
        if cached is not None:
            return cached, True
        async with self._lock:
            cached = self.get()
            if cached is not None:
                return cached, True
            data = await factory()
            self.set(data)
            return data, False
