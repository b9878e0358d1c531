"""Key-value caches with expiry."""

from __future__ import annotations

import threading
import time
from abc import ABC, abstractmethod
from datetime import timedelta
from typing import Any, Callable, Dict, Optional, Tuple, Union

Timeout = Union[float, int, timedelta]


class Cache(ABC):
    """Storage for values that expire after a timeout."""

    @abstractmethod
    def get(self, key: str) -> Optional[Any]:
        """Return the stored value, or None when missing or expired."""

    @abstractmethod
    def set(self, key: str, value: Any, timeout: Timeout) -> None:
        """Store ``value`` under ``key`` for ``timeout`` seconds."""


class MemoryCache(Cache):
    """Thread-safe in-process cache."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._store: Dict[str, Tuple[Any, float]] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[Any]:
        with self._lock:
            item = self._store.get(key)
            if item is None:
                return None
            value, deadline = item
            if self._clock() >= deadline:
                del self._store[key]
                return None
            return value

    def set(self, key: str, value: Any, timeout: Timeout) -> None:
        seconds = timeout.total_seconds() if isinstance(timeout, timedelta) else float(timeout)
        with self._lock:
            self._store[key] = (value, self._clock() + seconds)

    def delete(self, key: str) -> None:
        """Remove ``key``; missing keys are ignored."""
        with self._lock:
            self._store.pop(key, None)