"""Configuration for a walk.

Defines the scheduling steps a strategy may choose for a child and the
parameters that describe which roots are walked and how much concurrency
the walker may use.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List


class Step(Enum):
    """How the walker should process a single child entry.

    Strategies return one of these from decide_child. The three values are
    deliberately distinct: a synchronous child folds its snapshot back into
    the parent, a concurrent one does not.
    """
    SKIP = "skip"                   # Entry handled, no recursion
    SYNCHRONOUS = "synchronous"     # Recurse inline, then call after_child
    CONCURRENT = "concurrent"       # Schedule independently, no fold-back


@dataclass
class WalkParams:
    """Parameters for a walk across one or more trees.

    Every root is walked independently, but all of them share one visited
    record and one concurrency gate.
    """

    root: Any = None                                    # Primary root node
    extra_roots: List[Any] = field(default_factory=list)  # Walked alongside root
    max_parallel: int = 0                               # <= 0 means unlimited
    buffer_size: int = 0                                # Expected result count hint

    def roots(self) -> List[Any]:
        """Return the primary root followed by all extra roots."""
        return [self.root, *self.extra_roots]

    def validate(self) -> List[str]:
        """Validate parameters for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.root is None:
            errors.append("root is required")

        for index, root in enumerate(self.extra_roots):
            if root is None:
                errors.append(f"extra_roots[{index}] cannot be None")

        if self.buffer_size < 0:
            errors.append("buffer_size cannot be negative")

        return errors
