"""Per-node traversal context.

A WalkContext describes the node a traversal unit is currently processing.
It is owned by exactly one unit (and its synchronous descendants) and is
recycled through a ContextPool once that unit finishes.
"""

from typing import Any, Callable, Generic, List, Optional, Tuple, TypeVar

S = TypeVar('S')

ResultSink = Callable[[str, str, float], None]


class WalkContext(Generic[S]):
    """Handle on the node currently being walked.

    Instances are created by the walker only. They must not be retained
    beyond the strategy hook they were passed to.
    """

    __slots__ = (
        '_sink',
        '_root',
        '_node',
        '_path',
        '_node_path',
        '_canonical_path',
        '_snapshot',
    )

    def __init__(self):
        self._reset()

    def _reset(self) -> None:
        self._sink: Optional[ResultSink] = None
        self._root: Any = None
        self._node: Any = None
        self._path: Tuple[str, ...] = ()
        self._node_path = ""
        self._canonical_path = ""
        self._snapshot: Any = None

    def _bind(self, canonical: str) -> None:
        """Attach the resolved path of the current node."""
        self._canonical_path = canonical
        self._node_path = self._node.path

    @property
    def root(self) -> Any:
        """Root node the current walk started from."""
        return self._root

    @property
    def node(self) -> Any:
        """Node being processed."""
        return self._node

    @property
    def node_path(self) -> str:
        """Un-normalized path of the current node."""
        return self._node_path

    @property
    def canonical_path(self) -> str:
        return self._canonical_path

    @property
    def path(self) -> Tuple[str, ...]:
        """Names of the entries leading from the root to this node."""
        return self._path

    @property
    def depth(self) -> int:
        """Depth of this node, always equal to len(path)."""
        return len(self._path)

    @property
    def snapshot(self) -> S:
        return self._snapshot

    def update_snapshot(self, update: Callable[[S], S]) -> None:
        """Replace the snapshot with update(snapshot)."""
        self._snapshot = update(self._snapshot)

    def mark_result(self, score: float) -> None:
        """Mark the current node as a result with the given score.

        May be called several times; every call adds one record.
        """
        self._sink(self._node_path, self._canonical_path, float(score))

    def __repr__(self) -> str:
        return f"WalkContext(path={self._path!r}, node={self._node!r})"


class ContextPool(Generic[S]):
    """Free list of WalkContext objects for one walk."""

    def __init__(self, sink: ResultSink):
        self._sink = sink
        self._free: List[WalkContext[S]] = []
        self.created = 0

    def _acquire(self) -> WalkContext[S]:
        if self._free:
            return self._free.pop()
        self.created += 1
        return WalkContext()

    def new_root(self, root: Any, snapshot: S) -> WalkContext[S]:
        """Create the context for a root node."""
        ctx = self._acquire()
        ctx._sink = self._sink
        ctx._root = root
        ctx._node = root
        ctx._snapshot = snapshot
        return ctx

    def derive(self, parent: WalkContext[S], entry: Any, node: Any, snapshot: S) -> WalkContext[S]:
        """Create a child context below parent.

        The child gets its own path and snapshot and shares the parent's
        root.
        """
        ctx = self._acquire()
        ctx._sink = self._sink
        ctx._root = parent._root
        ctx._node = node
        ctx._path = parent._path + (entry.name,)
        ctx._snapshot = snapshot
        return ctx

    def release(self, ctx: WalkContext[S]) -> None:
        """Reset a context and return it to the pool."""
        ctx._reset()
        self._free.append(ctx)

    def __len__(self) -> int:
        return len(self._free)
