"""Tests for the filesystem walk node."""

import os
import pytest

from repowalk.aio import AsyncFileSystemNode
from repowalk.aio.adapters import filesystem
from repowalk.aio.adapters.filesystem import is_directory
from repowalk.exceptions import NodeCheckError, NodeListingError, NodeResolutionError


@pytest.fixture
def base(tmp_path):
    base = tmp_path.resolve()
    (base / "dir").mkdir()
    (base / "file").write_text("content")
    os.symlink(base / "dir", base / "dirlink")
    os.symlink(base / "file", base / "filelink")
    return base


@pytest.mark.parametrize("name, follow, expected", [
    ("dir", False, True),
    ("dir", True, True),
    ("dirlink", False, False),
    ("dirlink", True, True),
    ("file", False, False),
    ("file", True, False),
    ("filelink", False, False),
    ("filelink", True, False),
    ("missing", False, False),
    ("missing", True, False),
])
def test_is_directory(base, name, follow, expected):
    assert is_directory(base / name, follow) is expected


@pytest.mark.asyncio
async def test_list_children_sorted(base):
    for name in ("zz", "b", "a"):
        (base / "dir" / name).mkdir()
    node = AsyncFileSystemNode(base / "dir")

    entries = await node.list_children(node.path)

    assert [e.name for e in entries] == ["a", "b", "zz"]


@pytest.mark.asyncio
async def test_list_children_missing(base):
    node = AsyncFileSystemNode(base / "missing")

    with pytest.raises(NodeListingError) as info:
        await node.list_children(node.path)

    assert info.value.path == str(base / "missing")
    assert isinstance(info.value.__cause__, FileNotFoundError)


@pytest.mark.asyncio
async def test_can_descend_respects_links(base):
    entries = {e.name: e for e in await AsyncFileSystemNode(base).list_children(str(base))}

    plain = AsyncFileSystemNode(base)
    following = AsyncFileSystemNode(base, follow_symlinks=True)

    assert await plain.can_descend(str(base), entries["dir"])
    assert not await plain.can_descend(str(base), entries["dirlink"])
    assert await following.can_descend(str(base), entries["dirlink"])
    assert not await following.can_descend(str(base), entries["filelink"])


@pytest.mark.asyncio
async def test_canonical_path_without_following(base):
    path = os.path.join(str(base), "dirlink", "..", "dirlink")
    node = AsyncFileSystemNode(path)

    assert await node.canonical_path() == path


@pytest.mark.asyncio
async def test_canonical_path_following(base):
    node = AsyncFileSystemNode(base / "dirlink", follow_symlinks=True)

    assert await node.canonical_path() == str(base / "dir")


@pytest.mark.asyncio
async def test_canonical_path_dangling_link(base):
    os.symlink(base / "gone", base / "dangling")
    node = AsyncFileSystemNode(base / "dangling", follow_symlinks=True)

    with pytest.raises(NodeResolutionError) as info:
        await node.canonical_path()

    assert info.value.path == str(base / "dangling")


def test_child_node_keeps_parent_path(base):
    parent = AsyncFileSystemNode(base / "dirlink", follow_symlinks=True)
    entry = type("Entry", (), {"name": "child"})()

    child = parent.child_node(parent.path, str(base / "dir"), entry)

    assert child.path == os.path.join(str(base / "dirlink"), "child")
    assert child.follow_symlinks is True


@pytest.mark.asyncio
async def test_can_descend_failure(base, monkeypatch):
    def denied(path, follow_symlinks):
        raise PermissionError(f"cannot stat {path}")

    monkeypatch.setattr(filesystem, "is_directory", denied)
    node = AsyncFileSystemNode(base)
    entry = type("Entry", (), {"name": "dir"})()

    with pytest.raises(NodeCheckError) as info:
        await node.can_descend(str(base), entry)

    assert info.value.path == str(base / "dir")
    assert isinstance(info.value.__cause__, PermissionError)
