"""In-memory per-service counter store.

Counts are process-local and start at zero. A single reader/writer lock
guards the whole mapping: increments are exclusive, lookups are shared.
"""
from __future__ import annotations

import logging
from collections import Counter

from service_tracker.rwlock import ReadWriteLock

logger = logging.getLogger(__name__)


class ServiceTracker:
    """Counts how many times each service name has been tracked.

    Usage:
      t = ServiceTracker()
      t.increment("billing")
      t.get_count("billing")  # -> 1
      t.get_count("unknown")  # -> 0
    """

    def __init__(self) -> None:
        self._counts: Counter = Counter()
        self._lock = ReadWriteLock()

    def increment(self, service: str) -> None:
        """Add one to the count for ``service``, creating it at 1 if absent."""
        with self._lock.write_locked():
            self._counts[service] += 1
            count = self._counts[service]
        logger.debug(f"Tracked service {service!r} (count={count})")

    def get_count(self, service: str) -> int:
        """Return the current count for ``service``, 0 if never tracked."""
        with self._lock.read_locked():
            # .get() so a lookup never inserts a key
            return self._counts.get(service, 0)

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._counts)
