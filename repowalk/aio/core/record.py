"""Visited-path record used for cycle and duplicate detection."""

import threading
from typing import Hashable, Set


class VisitedRecord:
    """A set of values that can be recorded exactly once.

    When several callers race to record the same value, exactly one of them
    observes it as new.
    """

    def __init__(self):
        self._seen: Set[Hashable] = set()
        self._lock = threading.Lock()

    def record(self, value: Hashable) -> bool:
        """Record a value.

        Returns:
            True if the value had already been recorded before this call
        """
        with self._lock:
            if value in self._seen:
                return True
            self._seen.add(value)
            return False

    def recorded(self, value: Hashable) -> bool:
        """Check if a value has been recorded."""
        with self._lock:
            return value in self._seen

    def reset(self) -> None:
        """Forget every recorded value."""
        with self._lock:
            self._seen.clear()

    def __contains__(self, value: Hashable) -> bool:
        return self.recorded(value)

    def __len__(self) -> int:
        with self._lock:
            return len(self._seen)
