"""Async filesystem node for the walker.

Represents a directory on disk. Blocking calls (scandir, stat, link
resolution) run in worker threads so many directories can be processed
at once.
"""

import asyncio
import os
import stat as stat_module  # To avoid name collision with stat results
from pathlib import Path
from typing import List, Union

from ...exceptions import NodeCheckError, NodeListingError, NodeResolutionError
from ..core import AsyncWalkNode


def is_directory(path: Union[str, Path], follow_symlinks: bool) -> bool:
    """Check if path refers to a directory.

    When follow_symlinks is False a link is never a directory, even if it
    points to one. A path that does not exist is not a directory.

    Raises:
        OSError: If the path exists but cannot be inspected
    """
    try:
        if follow_symlinks:
            st = os.stat(path)
        else:
            st = os.lstat(path)
    except FileNotFoundError:
        return False
    return stat_module.S_ISDIR(st.st_mode)


def _scan_directory_sync(path: str) -> List[os.DirEntry]:
    """List a directory sorted by entry name."""
    with os.scandir(path) as iterator:
        entries = list(iterator)
    entries.sort(key=lambda entry: entry.name)
    return entries


class AsyncFileSystemNode(AsyncWalkNode):
    """A directory on the real filesystem.

    Symbolic links are only resolved when follow_symlinks is set; otherwise
    a link shows up in listings but is never descended into.
    """

    def __init__(self, path: Union[str, Path], follow_symlinks: bool = False):
        """Initialize filesystem node.

        Args:
            path: Path to the directory
            follow_symlinks: Whether to follow and resolve symbolic links
        """
        self._path = os.fspath(path)
        self.follow_symlinks = follow_symlinks

    @property
    def path(self) -> str:
        return self._path

    async def canonical_path(self) -> str:
        """Get the canonical path of this directory.

        Without follow_symlinks this is the path itself.
        """
        if not self.follow_symlinks:
            return self._path

        try:
            resolved = await asyncio.to_thread(Path(self._path).resolve, True)
        except (OSError, RuntimeError) as e:
            raise NodeResolutionError(self._path, "failed to evaluate symlinks") from e
        return str(resolved)

    async def list_children(self, path: str) -> List[os.DirEntry]:
        """List directory entries sorted by name."""
        try:
            return await asyncio.to_thread(_scan_directory_sync, path)
        except OSError as e:
            raise NodeListingError(path) from e

    async def can_descend(self, path: str, entry: os.DirEntry) -> bool:
        child = os.path.join(path, entry.name)
        try:
            return await asyncio.to_thread(is_directory, child, self.follow_symlinks)
        except OSError as e:
            raise NodeCheckError(child) from e

    def child_node(self, path: str, canonical: str, entry: os.DirEntry) -> 'AsyncFileSystemNode':
        return AsyncFileSystemNode(
            os.path.join(path, entry.name),
            follow_symlinks=self.follow_symlinks
        )

    def __repr__(self) -> str:
        return f"AsyncFileSystemNode({self._path!r}, follow_symlinks={self.follow_symlinks})"
