"""Sweep strategy: find subtrees that are recursively empty.

A node is empty when it contains nothing but (recursively) empty
directories. Results are scored by depth so that deeper directories come
first, which is the order in which they can be removed.
"""

from typing import Any, Awaitable, Callable, Optional, Union

from ...config import Step
from ..core import AsyncWalkNode, WalkContext, WalkStrategy
from ._predicates import call_predicate

StopFunc = Callable[[str, AsyncWalkNode, int], Union[bool, Awaitable[bool]]]


class Sweep(WalkStrategy[bool]):
    """Mark every node whose whole subtree holds no non-recursable entry.

    stop(path, root, depth) may end the walk at a node early; such a node
    is treated as non-empty. The snapshot is the node's is-empty flag.
    """

    def __init__(self, stop: Optional[StopFunc] = None):
        self.stop = stop

    def initial_snapshot(self) -> bool:
        return False

    async def enter_node(self, ctx: WalkContext[bool]) -> bool:
        if self.stop is not None:
            if await call_predicate(self.stop, ctx.node_path, ctx.root, ctx.depth):
                return False

        ctx.update_snapshot(lambda _: True)
        return True

    async def decide_child(self, entry: Any, valid: bool, ctx: WalkContext[bool]) -> Step:
        if not valid:
            # a file (or link) disproves emptiness without recursing
            ctx.update_snapshot(lambda _: False)
            return Step.SKIP
        if ctx.snapshot:
            # undecided until this child is resolved
            return Step.SYNCHRONOUS
        return Step.CONCURRENT

    async def after_child(self, entry: Any, child_snapshot: bool, succeeded: bool, ctx: WalkContext[bool]) -> None:
        ctx.update_snapshot(
            lambda is_empty: is_empty and succeeded and bool(child_snapshot)
        )

    async def after_node(self, ctx: WalkContext[bool]) -> None:
        if ctx.snapshot:
            ctx.mark_result(ctx.depth)
