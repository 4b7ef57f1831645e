import os
import sys
from typing import List

import pytest
from pydantic import TypeAdapter

from storage.drivers.listing import (
    DirectoryNode,
    FileNode,
    ListingNode,
    build_listing,
    listing_to_dicts,
)

pytestmark = pytest.mark.unit


def _sorted(listing):
    """Orders a listing by name at every level so enumeration order doesn't matter."""
    result = []
    for node in sorted(listing, key=lambda n: n.name):
        if isinstance(node, DirectoryNode):
            node = DirectoryNode(name=node.name, children=_sorted(node.children))
        result.append(node)
    return result


@pytest.fixture
def sample_tree(tmp_path):
    (tmp_path / "a.txt").write_bytes(b"a")
    (tmp_path / "b").mkdir()
    (tmp_path / "b" / "c.txt").write_bytes(b"c")
    return tmp_path


@pytest.mark.asyncio
async def test_build_listing_nested_tree(sample_tree):
    listing = await build_listing(str(sample_tree))

    assert _sorted(listing) == [
        FileNode(name="a.txt"),
        DirectoryNode(name="b", children=[FileNode(name="c.txt")]),
    ]


@pytest.mark.asyncio
async def test_build_listing_empty_directory(tmp_path):
    assert await build_listing(str(tmp_path)) == []


@pytest.mark.asyncio
async def test_build_listing_includes_empty_subdirectories(tmp_path):
    (tmp_path / "empty").mkdir()
    (tmp_path / "deep" / "er" / "est").mkdir(parents=True)

    listing = _sorted(await build_listing(str(tmp_path)))

    assert listing == [
        DirectoryNode(
            name="deep",
            children=[DirectoryNode(name="er", children=[DirectoryNode(name="est")])],
        ),
        DirectoryNode(name="empty"),
    ]


@pytest.mark.asyncio
async def test_build_listing_missing_directory_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        await build_listing(str(tmp_path / "missing"))


@pytest.mark.asyncio
@pytest.mark.skipif(sys.platform == "win32", reason="symlinks need privileges on Windows")
async def test_build_listing_follows_directory_symlinks(tmp_path):
    target = tmp_path / "target"
    target.mkdir()
    (target / "inner.txt").write_bytes(b"x")
    root = tmp_path / "root"
    root.mkdir()
    os.symlink(target, root / "link")

    listing = await build_listing(str(root))

    assert listing == [DirectoryNode(name="link", children=[FileNode(name="inner.txt")])]


def test_to_dict_renders_wire_shape():
    listing = [
        FileNode(name="foo.txt"),
        DirectoryNode(name="bar", children=[FileNode(name="baz.txt")]),
    ]

    assert listing_to_dicts(listing) == [
        {"type": "file", "name": "foo.txt"},
        {"type": "directory", "name": "bar", "objects": [{"type": "file", "name": "baz.txt"}]},
    ]


def test_listing_nodes_validate_from_kind_discriminator():
    adapter = TypeAdapter(List[ListingNode])
    listing = adapter.validate_python(
        [
            {"kind": "file", "name": "a.txt"},
            {"kind": "directory", "name": "b", "children": [{"kind": "file", "name": "c.txt"}]},
        ]
    )

    assert isinstance(listing[0], FileNode)
    assert isinstance(listing[1], DirectoryNode)
    assert listing[1].children == [FileNode(name="c.txt")]
