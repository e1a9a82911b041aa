"""Async node implementations for concrete tree sources."""

from .filesystem import AsyncFileSystemNode, is_directory

__all__ = [
    'AsyncFileSystemNode',
    'is_directory',
]
