"""Scan strategy: enumerate every node matching a predicate.

Scan needs no data flow between parents and children, so every child is
walked concurrently.
"""

from typing import Any, Awaitable, Callable, Optional, Tuple, Union

from ...config import Step
from ..core import AsyncWalkNode, WalkContext, WalkStrategy
from ._predicates import call_predicate

MatchResult = Tuple[bool, bool]
ScoreResult = Tuple[float, bool]

MatchFunc = Callable[[str, AsyncWalkNode, int], Union[MatchResult, Awaitable[MatchResult]]]
ScoreFunc = Callable[[str, AsyncWalkNode, int], Union[ScoreResult, Awaitable[ScoreResult]]]


def scan_match(value: bool) -> float:
    """Turn a boolean match into a ScoredScan score.

    True becomes 1.0, False becomes -1.0 (not a match).
    """
    return 1.0 if value else -1.0


class Scan(WalkStrategy[None]):
    """Mark every node for which match(path, root, depth) is true.

    The predicate returns a pair (is_match, keep_descending). Matches are
    marked with score 0, so results come out in plain path order. Without
    a predicate every node matches and the walk always continues.
    """

    def __init__(self, match: Optional[MatchFunc] = None):
        self.match = match

    async def enter_node(self, ctx: WalkContext[None]) -> bool:
        if self.match is None:
            ctx.mark_result(0)
            return True

        is_match, keep_descending = await call_predicate(
            self.match, ctx.node_path, ctx.root, ctx.depth
        )
        if is_match:
            ctx.mark_result(0)
        return keep_descending

    async def decide_child(self, entry: Any, valid: bool, ctx: WalkContext[None]) -> Step:
        return Step.CONCURRENT

    async def after_child(self, entry: Any, child_snapshot: None, succeeded: bool, ctx: WalkContext[None]) -> None:
        return None

    async def after_node(self, ctx: WalkContext[None]) -> None:
        return None


class ScoredScan(Scan):
    """Scan variant where the predicate assigns each match a score.

    The predicate returns (score, keep_descending). A negative score means
    the node does not match; any other score marks it, so higher scoring
    nodes are returned first.
    """

    def __init__(self, match: Optional[ScoreFunc] = None):
        super().__init__(match)

    async def enter_node(self, ctx: WalkContext[None]) -> bool:
        if self.match is None:
            ctx.mark_result(0)
            return True

        score, keep_descending = await call_predicate(
            self.match, ctx.node_path, ctx.root, ctx.depth
        )
        if score >= 0:
            ctx.mark_result(score)
        return keep_descending
