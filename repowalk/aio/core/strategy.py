"""Walk strategy abstraction.

A strategy holds all domain decisions of a walk: whether a node matters,
how each child is scheduled and how child outcomes are folded back into
the parent's snapshot.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from ...config import Step
from .context import WalkContext

S = TypeVar('S')


class WalkStrategy(ABC, Generic[S]):
    """Abstract base class for walk strategies.

    The snapshot type S is chosen by the strategy. Strategies must not keep
    references to contexts beyond the hook they were passed to. Any
    exception raised by a hook aborts processing of that node and is handed
    to the walker's error policy.
    """

    def initial_snapshot(self) -> S:
        """Snapshot every context starts out with."""
        return None

    @abstractmethod
    async def enter_node(self, ctx: WalkContext[S]) -> bool:
        """Called once for every node, before anything else.

        May mark results on the context.

        Returns:
            True if the children of this node should be visited
        """
        pass

    @abstractmethod
    async def decide_child(self, entry: Any, valid: bool, ctx: WalkContext[S]) -> Step:
        """Decide how a listed entry should be processed.

        Args:
            entry: Entry returned by the node's listing
            valid: True if the entry can be descended into. For invalid
                entries the returned step is ignored.
            ctx: Context of the parent node

        Returns:
            Step to take for the entry
        """
        pass

    @abstractmethod
    async def after_child(self, entry: Any, child_snapshot: S, succeeded: bool, ctx: WalkContext[S]) -> None:
        """Fold the outcome of a synchronous child into the parent.

        Args:
            entry: Entry of the child
            child_snapshot: Final snapshot of the child context
            succeeded: False if the child failed, was already visited, or
                declined to descend
            ctx: Context of the parent node
        """
        pass

    @abstractmethod
    async def after_node(self, ctx: WalkContext[S]) -> None:
        """Called once all children were processed or scheduled.

        Not called when enter_node declined to descend.
        """
        pass
