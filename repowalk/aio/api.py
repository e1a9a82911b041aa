"""High-level async API for repowalk.

Simple functions for the two built-in walks. Roots may be given as walk
nodes or as filesystem paths.
"""

from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from ..config import WalkParams
from .adapters import AsyncFileSystemNode
from .core import AsyncWalkNode, Walker
from .error_policies import ErrorPolicy
from .strategies import Scan, ScoredScan, Sweep
from .strategies.scan import MatchFunc, ScoreFunc
from .strategies.sweep import StopFunc

RootLike = Union[AsyncWalkNode, str, Path]


def as_node(root: RootLike, follow_symlinks: bool = False) -> AsyncWalkNode:
    """Wrap a path into an AsyncFileSystemNode; nodes are returned as-is."""
    if isinstance(root, AsyncWalkNode):
        return root
    return AsyncFileSystemNode(root, follow_symlinks=follow_symlinks)


def _params(
    root: RootLike,
    extra_roots: Iterable[RootLike],
    follow_symlinks: bool,
    max_parallel: int,
    buffer_size: int
) -> WalkParams:
    return WalkParams(
        root=as_node(root, follow_symlinks),
        extra_roots=[as_node(r, follow_symlinks) for r in extra_roots],
        max_parallel=max_parallel,
        buffer_size=buffer_size,
    )


async def scan(
    root: RootLike,
    match: Optional[MatchFunc] = None,
    extra_roots: Iterable[RootLike] = (),
    follow_symlinks: bool = False,
    max_parallel: int = 0,
    buffer_size: int = 0,
    resolved: bool = True,
    error_policy: Optional[ErrorPolicy] = None
) -> List[str]:
    """Find all nodes matching a predicate.

    Args:
        root: Root node or directory to scan
        match: Predicate (path, root, depth) -> (is_match, keep_descending);
            None matches everything
        extra_roots: Additional roots walked alongside root
        follow_symlinks: Follow links when roots are given as paths
        max_parallel: Maximum concurrent units (<= 0 for unlimited)
        buffer_size: Expected number of results
        resolved: Return canonical paths instead of un-normalized ones
        error_policy: Error handling policy for the walk

    Returns:
        Matching paths in lexicographic order

    Example:
        >>> repos = await scan("~/Projects", lambda p, r, d: (is_repo(p), not is_repo(p)))
    """
    walker = Walker(
        Scan(match),
        _params(root, extra_roots, follow_symlinks, max_parallel, buffer_size),
        error_policy
    )
    await walker.walk()
    return walker.paths(resolved)


async def scan_scores(
    root: RootLike,
    match: Optional[ScoreFunc] = None,
    extra_roots: Iterable[RootLike] = (),
    follow_symlinks: bool = False,
    max_parallel: int = 0,
    buffer_size: int = 0,
    resolved: bool = True,
    error_policy: Optional[ErrorPolicy] = None
) -> Tuple[List[str], List[float]]:
    """Find all nodes a scoring predicate accepts, best scores first.

    The predicate returns (score, keep_descending); negative scores do not
    match. See scan() for the remaining arguments.

    Returns:
        Tuple of (paths, scores) ordered by score then path
    """
    walker = Walker(
        ScoredScan(match),
        _params(root, extra_roots, follow_symlinks, max_parallel, buffer_size),
        error_policy
    )
    await walker.walk()
    return walker.paths(resolved), walker.scores()


async def sweep(
    root: RootLike,
    stop: Optional[StopFunc] = None,
    extra_roots: Iterable[RootLike] = (),
    follow_symlinks: bool = False,
    max_parallel: int = 0,
    buffer_size: int = 0,
    resolved: bool = True,
    error_policy: Optional[ErrorPolicy] = None
) -> List[str]:
    """Find all recursively empty directories.

    Args:
        root: Root node or directory to sweep
        stop: Predicate (path, root, depth) -> bool; True treats the node as
            non-empty without looking inside
        See scan() for the remaining arguments.

    Returns:
        Empty directories, deepest first, so they can be removed in order
    """
    walker = Walker(
        Sweep(stop),
        _params(root, extra_roots, follow_symlinks, max_parallel, buffer_size),
        error_policy
    )
    await walker.walk()
    return walker.paths(resolved)
