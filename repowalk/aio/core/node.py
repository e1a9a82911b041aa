"""Async walk node abstraction.

Defines the capability the walker consumes to move through a tree. A node
stores no traversal state; child nodes are derived from their parent and
never mutated.
"""

from abc import ABC, abstractmethod
from typing import Any, List


class AsyncWalkNode(ABC):
    """Abstract base class for nodes the walker can descend into.

    Entries returned by list_children are opaque to the walker apart from
    their ``name`` attribute, which becomes part of the path from the root.
    """

    @property
    @abstractmethod
    def path(self) -> str:
        """Un-normalized path of this node, as reached from its root."""
        pass

    @abstractmethod
    async def canonical_path(self) -> str:
        """Get the canonical path of this node.

        Called once per visit and may perform slow normalization such as
        resolving links. The result is used for cycle detection and is
        passed back to every other method of this node.

        Returns:
            Canonical path as string
        """
        pass

    @abstractmethod
    async def list_children(self, path: str) -> List[Any]:
        """List the entries directly below this node.

        Entries are returned in a fixed order; filesystem implementations
        sort them by name.

        Args:
            path: Canonical path of this node

        Returns:
            List of entries, each with a ``name`` attribute
        """
        pass

    @abstractmethod
    async def can_descend(self, path: str, entry: Any) -> bool:
        """Check if an entry is itself a node the walker can recurse into.

        Args:
            path: Canonical path of this node
            entry: One of the entries returned by list_children

        Returns:
            True if child_node may be called for the entry
        """
        pass

    @abstractmethod
    def child_node(self, path: str, canonical: str, entry: Any) -> 'AsyncWalkNode':
        """Create the node for an entry.

        Only called when can_descend returned True.

        Args:
            path: Un-normalized path of this node
            canonical: Canonical path of this node
            entry: Entry to create a node for

        Returns:
            Node representing the entry
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.path!r})"
