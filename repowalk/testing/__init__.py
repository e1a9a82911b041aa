"""Testing utilities for repowalk and its consumers."""

from .fixtures import InMemoryTree, InMemoryTreeNode, MemoryEntry, MemoryLink

__all__ = ['InMemoryTree', 'InMemoryTreeNode', 'MemoryEntry', 'MemoryLink']
