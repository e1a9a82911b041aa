"""repowalk - concurrent, cycle-safe tree walking.

repowalk walks directory trees (or any tree exposed through AsyncWalkNode)
with a pluggable strategy deciding which nodes are results and how children
are scheduled. Two strategies ship with it:

    Scan   - find every node matching a predicate
    Sweep  - find every recursively empty subtree

Choose your entry point:
━━━━━━━━━━━━━━━━━━━━━━━━━━
Synchronous:
    from repowalk import scan_tree, sweep_tree

Asynchronous:
    from repowalk.aio import scan, sweep, Walker
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

__version__ = "0.1.0"

from . import aio
from .api import scan_tree, scan_tree_scores, sweep_tree
from .config import Step, WalkParams
from .exceptions import (
    WalkError,
    NodeResolutionError,
    NodeListingError,
    NodeCheckError,
    UnknownStepError,
    WalkerStateError,
)

__all__ = [
    "__version__",
    "aio",
    "scan_tree",
    "scan_tree_scores",
    "sweep_tree",
    "Step",
    "WalkParams",
    "WalkError",
    "NodeResolutionError",
    "NodeListingError",
    "NodeCheckError",
    "UnknownStepError",
    "WalkerStateError",
]
