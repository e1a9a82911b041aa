"""Test fixtures for repowalk consumers.

InMemoryTree provides a walkable tree that lives entirely in memory, with
links, injectable failures and artificial latency. It lets strategies be
tested without creating directories on disk.

Example:
    tree = InMemoryTree({
        "a": {"a1": {}, "file": None},
        "loop": MemoryLink("/a"),
    }, follow_links=True)
    walker = Walker(Scan(), WalkParams(root=tree.node()))
"""

import asyncio
from typing import Any, Dict, Iterable, List, NamedTuple, Tuple

from ..aio.core import AsyncWalkNode


class MemoryLink(NamedTuple):
    """A link to another directory of the same tree, by absolute path."""

    target: str


class MemoryEntry(NamedTuple):
    """Directory entry returned by InMemoryTreeNode.list_children."""

    name: str


Structure = Dict[str, Any]


def _split(path: str) -> List[str]:
    return [part for part in path.split("/") if part]


def _join(parent: str, name: str) -> str:
    return parent.rstrip("/") + "/" + name


class InMemoryTree:
    """A tree of nested dictionaries.

    Values of the structure are interpreted as follows:
        dict        - a directory
        MemoryLink  - a link to another directory of the tree
        None (or anything else) - a file

    Paths are absolute and slash separated; the root is "/".
    """

    def __init__(
        self,
        structure: Structure,
        follow_links: bool = False,
        failing_listings: Iterable[str] = (),
        failing_resolutions: Iterable[str] = (),
        delay: float = 0.0
    ):
        """Initialize tree.

        Args:
            structure: Nested dictionaries describing the tree
            follow_links: Whether links can be descended into
            failing_listings: Canonical paths whose listing raises OSError
            failing_resolutions: Node paths whose resolution raises OSError
            delay: Seconds to sleep in every listing, to simulate I/O
        """
        self.structure = structure
        self.follow_links = follow_links
        self.failing_listings = set(failing_listings)
        self.failing_resolutions = set(failing_resolutions)
        self.delay = delay
        self.listed: List[str] = []

    def node(self, path: str = "/") -> 'InMemoryTreeNode':
        """Create the node for a path of this tree."""
        return InMemoryTreeNode(self, path)

    def resolve(self, path: str) -> Tuple[str, Structure]:
        """Resolve every link along path.

        Returns:
            Tuple of (canonical path, directory dictionary)

        Raises:
            FileNotFoundError: If path does not name a directory
        """
        return self._resolve(path, 0)

    def _resolve(self, path: str, hops: int) -> Tuple[str, Structure]:
        if hops > 40:
            raise OSError(f"too many levels of links: {path}")

        current: Structure = self.structure
        canonical = "/"
        for part in _split(path):
            value = current.get(part) if isinstance(current, dict) else None
            if isinstance(value, MemoryLink):
                canonical, value = self._resolve(value.target, hops + 1)
            elif isinstance(value, dict):
                canonical = _join(canonical, part)
            else:
                raise FileNotFoundError(f"no such directory: {path}")
            current = value
        return canonical, current

    def value_at(self, path: str, name: str) -> Any:
        _, directory = self.resolve(path)
        return directory[name]


class InMemoryTreeNode(AsyncWalkNode):
    """Walk node backed by an InMemoryTree."""

    def __init__(self, tree: InMemoryTree, path: str = "/"):
        self.tree = tree
        self._path = path

    @property
    def path(self) -> str:
        return self._path

    async def canonical_path(self) -> str:
        if self._path in self.tree.failing_resolutions:
            raise OSError(f"cannot resolve {self._path}")
        if not self.tree.follow_links:
            return self._path
        canonical, _ = self.tree.resolve(self._path)
        return canonical

    async def list_children(self, path: str) -> List[MemoryEntry]:
        if self.tree.delay:
            await asyncio.sleep(self.tree.delay)
        else:
            await asyncio.sleep(0)

        self.tree.listed.append(path)
        if path in self.tree.failing_listings:
            raise OSError(f"cannot list {path}")

        _, directory = self.tree.resolve(path)
        return [MemoryEntry(name) for name in sorted(directory)]

    async def can_descend(self, path: str, entry: MemoryEntry) -> bool:
        value = self.tree.value_at(path, entry.name)
        if isinstance(value, MemoryLink):
            return self.tree.follow_links
        return isinstance(value, dict)

    def child_node(self, path: str, canonical: str, entry: MemoryEntry) -> 'InMemoryTreeNode':
        return InMemoryTreeNode(self.tree, _join(path, entry.name))

    def __repr__(self) -> str:
        return f"InMemoryTreeNode({self._path!r})"
