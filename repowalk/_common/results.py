"""Result records and their ordering.

Every strategy marks results through the same record type, and every walk
sorts them with the same rule: score descending, then canonical path
ascending.
"""

from typing import List, NamedTuple, Optional, Tuple


class WalkResult(NamedTuple):
    """A single (path, score) mark emitted by a strategy."""

    node_path: str        # Un-normalized path of the marked node
    canonical_path: str   # Canonical path, used for ordering
    score: float

    def sort_key(self) -> Tuple[float, str]:
        return (-self.score, self.canonical_path)


def sort_results(results: List[WalkResult]) -> List[WalkResult]:
    """Return results ordered by score descending, then path ascending."""
    return sorted(results, key=WalkResult.sort_key)


class ResultBuffer:
    """Append-only collection of result records.

    The buffer is preallocated to size_hint slots so that walks producing
    roughly that many results never grow the underlying list.
    """

    def __init__(self, size_hint: int = 0):
        self._items: List[Optional[WalkResult]] = [None] * max(size_hint, 0)
        self._count = 0

    def append(self, result: WalkResult) -> None:
        if self._count < len(self._items):
            self._items[self._count] = result
        else:
            self._items.append(result)
        self._count += 1

    def __len__(self) -> int:
        return self._count

    def collect(self) -> List[WalkResult]:
        """Return all appended records in insertion order."""
        return list(self._items[:self._count])
