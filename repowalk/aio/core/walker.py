"""Concurrent, cycle-safe tree walker.

The Walker drives one or more independent traversals to completion under a
single concurrency gate, a single visited record and a single error policy.
Every domain decision is delegated to a WalkStrategy.

A typical use looks like:

    walker = Walker(Scan(match), WalkParams(root=AsyncFileSystemNode(path)))
    await walker.walk()
    paths, scores = walker.results(), walker.scores()
"""

import asyncio
import logging
import threading
from enum import Enum
from typing import Any, Coroutine, Generic, List, Optional, Set, TypeVar

from ...config import Step, WalkParams
from ...exceptions import UnknownStepError, WalkerStateError
from ..._common.results import ResultBuffer, WalkResult, sort_results
from ..error_policies import ErrorPolicy, FirstErrorPolicy
from .context import ContextPool, WalkContext
from .gate import ConcurrencyGate
from .record import VisitedRecord
from .strategy import WalkStrategy

logger = logging.getLogger(__name__)

S = TypeVar('S')


class _WalkerState(Enum):
    UNUSED = "unused"
    RUNNING = "running"
    FINISHED = "finished"


class Walker(Generic[S]):
    """Walks trees of AsyncWalkNode objects using a strategy.

    Each Walker may be used for exactly one walk. The visited record and
    the result buffer are tied to that walk and cannot be reused.
    """

    def __init__(
        self,
        strategy: WalkStrategy[S],
        params: WalkParams,
        error_policy: Optional[ErrorPolicy] = None
    ):
        """Initialize walker.

        Args:
            strategy: Strategy making all per-node decisions
            params: Roots and concurrency settings
            error_policy: Error handling policy (defaults to FirstErrorPolicy)
        """
        errors = params.validate()
        if errors:
            raise ValueError(f"Invalid configuration: {', '.join(errors)}")

        self.strategy = strategy
        self.params = params
        self.error_policy = error_policy or FirstErrorPolicy()

        self._state = _WalkerState.UNUSED
        self._state_lock = threading.Lock()

        self._visited = VisitedRecord()
        self._buffer = ResultBuffer(params.buffer_size)
        self._pool: ContextPool[S] = ContextPool(self._report_result)
        self._gate: Optional[ConcurrencyGate] = None
        self._pending: Set[asyncio.Task] = set()

        self._results: List[WalkResult] = []

    async def walk(self) -> None:
        """Walk all roots until every traversal unit has finished.

        Errors do not cancel running units. Once everything has drained, the
        error selected by the error policy (by default the first one) is
        raised; results remain available in that case and describe a partial
        but consistent walk.

        Cancelling walk() cancels every unit and waits for them to stop.
        The results marked until then stay readable.

        Raises:
            WalkerStateError: If walk() was already called on this instance
        """
        with self._state_lock:
            if self._state is not _WalkerState.UNUSED:
                raise WalkerStateError("Walker.walk: attempted reuse")
            self._state = _WalkerState.RUNNING

        roots = self.params.roots()
        logger.debug("Starting walk over %d root(s), max_parallel=%d",
                     len(roots), self.params.max_parallel)

        try:
            self._gate = ConcurrencyGate(self.params.max_parallel)
            for root in roots:
                self._spawn(self._walk_root(root))

            while self._pending:
                await asyncio.wait(tuple(self._pending))
        except asyncio.CancelledError:
            logger.debug("Walk cancelled, stopping %d unit(s)", len(self._pending))
            await self._cancel_pending()
            raise
        finally:
            self._results = sort_results(self._buffer.collect())
            self._state = _WalkerState.FINISHED

        logger.debug("Walk finished: %d node(s) visited, %d result(s)",
                     len(self._visited), len(self._results))

        error = self.error_policy.first_error
        if error is not None:
            raise error

    # Scheduling

    def _spawn(self, coro: Coroutine[Any, Any, None]) -> None:
        task = asyncio.ensure_future(coro)
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _cancel_pending(self) -> None:
        # units may spawn children before noticing their own cancellation
        while self._pending:
            for task in tuple(self._pending):
                task.cancel()
            await asyncio.wait(tuple(self._pending))

    async def _walk_root(self, root: Any) -> None:
        async with self._gate:
            try:
                snapshot = self.strategy.initial_snapshot()
            except Exception as e:
                self._report_error(e, 'initial_snapshot', None)
                return

            ctx = self._pool.new_root(root, snapshot)
            try:
                await self._visit(ctx)
            except Exception as e:
                self._report_error(e, 'walk', ctx.canonical_path or None)
            finally:
                self._pool.release(ctx)

    async def _walk_concurrent(self, ctx: WalkContext[S]) -> None:
        try:
            async with self._gate:
                await self._visit(ctx)
        except Exception as e:
            self._report_error(e, 'walk', ctx.canonical_path or None)
        finally:
            self._pool.release(ctx)

    # Per-node algorithm

    async def _visit(self, ctx: WalkContext[S]) -> bool:
        """Process one node and its synchronous descendants.

        Returns:
            True if the node was entered and fully processed
        """
        node = ctx.node

        try:
            canonical = await node.canonical_path()
        except Exception as e:
            self._report_error(e, 'canonical_path', node.path)
            return False

        try:
            ctx._bind(canonical)
        except Exception as e:
            self._report_error(e, 'canonical_path', canonical)
            return False

        if self._visited.record(canonical):
            logger.debug("Skipping already visited path %s", canonical)
            return False

        try:
            should_descend = await self.strategy.enter_node(ctx)
        except Exception as e:
            self._report_error(e, 'enter_node', canonical)
            return False
        if not should_descend:
            return False

        try:
            entries = await node.list_children(canonical)
        except Exception as e:
            self._report_error(e, 'list_children', canonical)
            return False

        for entry in entries:
            try:
                valid = await node.can_descend(canonical, entry)
            except Exception as e:
                self._report_error(e, 'can_descend', canonical)
                continue

            try:
                step = await self.strategy.decide_child(entry, valid, ctx)
            except Exception as e:
                self._report_error(e, 'decide_child', canonical)
                return False

            if not valid or step is Step.SKIP:
                continue
            if step is not Step.CONCURRENT and step is not Step.SYNCHRONOUS:
                self._report_error(UnknownStepError(step), 'decide_child', canonical)
                return False

            try:
                child_node = node.child_node(ctx.node_path, canonical, entry)
            except Exception as e:
                self._report_error(e, 'child_node', canonical)
                continue

            try:
                snapshot = self.strategy.initial_snapshot()
            except Exception as e:
                self._report_error(e, 'initial_snapshot', canonical)
                return False

            child = self._pool.derive(ctx, entry, child_node, snapshot)

            if step is Step.CONCURRENT:
                self._spawn(self._walk_concurrent(child))
                continue

            try:
                succeeded = await self._visit(child)
            except Exception as e:
                self._report_error(e, 'walk', child.canonical_path or canonical)
                succeeded = False
            finally:
                child_snapshot = child.snapshot
                self._pool.release(child)

            try:
                await self.strategy.after_child(entry, child_snapshot, succeeded, ctx)
            except Exception as e:
                self._report_error(e, 'after_child', canonical)
                return False

        try:
            await self.strategy.after_node(ctx)
        except Exception as e:
            self._report_error(e, 'after_node', canonical)
            return False
        return True

    # Reporting

    def _report_result(self, node_path: str, canonical_path: str, score: float) -> None:
        self._buffer.append(WalkResult(node_path, canonical_path, score))

    def _report_error(self, error: Exception, stage: str, path: Optional[str]) -> None:
        logger.debug("Error in %s for '%s': %s", stage, path, error)
        self.error_policy.handle(error, stage, path)

    # Results

    def _require_finished(self, method: str) -> None:
        if self._state is not _WalkerState.FINISHED:
            raise WalkerStateError(f"Walker.{method}: called before walk() returned")

    def results(self) -> List[str]:
        """Return the canonical paths of all marked nodes.

        Paths are ordered by score descending, then by canonical path.
        Each call returns a new list.

        Raises:
            WalkerStateError: If walk() has not returned yet
        """
        return self.paths(resolved=True)

    def paths(self, resolved: bool = True) -> List[str]:
        """Return the paths of all marked nodes, in result order.

        Args:
            resolved: If True return canonical paths, otherwise the
                un-normalized paths the nodes were reached by
        """
        self._require_finished('paths')
        if resolved:
            return [r.canonical_path for r in self._results]
        return [r.node_path for r in self._results]

    def scores(self) -> List[float]:
        """Return the scores of all marked nodes, parallel to results()."""
        self._require_finished('scores')
        return [r.score for r in self._results]

    def get_stats(self) -> dict:
        """Get walker statistics.

        Returns:
            Dictionary of statistics (visited nodes, results, concurrency)
        """
        return {
            'state': self._state.value,
            'visited': len(self._visited),
            'results': len(self._buffer),
            'max_parallel': self.params.max_parallel,
            'peak_parallel': self._gate.peak if self._gate else 0,
            'contexts_created': self._pool.created,
        }
