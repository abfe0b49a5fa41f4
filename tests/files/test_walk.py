"""Tests for directory tree walking."""

import pytest

from pagemap.files import is_directory
from pagemap.files import walk_tree


async def collect(root):
    return [entry.path async for entry in walk_tree(root)]


class TestWalkTree:
    """Tests for walk_tree()."""

    @pytest.mark.asyncio
    async def test_walk_empty_directory_yields_root(self, tmp_path):
        """Test that the root itself is the first entry."""
        root = tmp_path / "build"
        root.mkdir()

        paths = await collect(root)

        assert paths == [root]

    @pytest.mark.asyncio
    async def test_walk_yields_files_and_directories_in_pre_order(self, tmp_path):
        """Test that each directory is followed by its contents."""
        root = tmp_path / "build"
        (root / "blog" / "2024").mkdir(parents=True)
        (root / "about.js").touch()
        (root / "blog" / "2024" / "post.js").touch()
        (root / "blog" / "index.js").touch()
        (root / "index.js").touch()

        paths = await collect(root)

        assert paths == [
            root,
            root / "about.js",
            root / "blog",
            root / "blog" / "2024",
            root / "blog" / "2024" / "post.js",
            root / "blog" / "index.js",
            root / "index.js",
        ]

    @pytest.mark.asyncio
    async def test_walk_does_not_follow_directory_symlinks(self, tmp_path):
        """Test that symlinked directories are yielded but not traversed."""
        external = tmp_path / "external"
        external.mkdir()
        (external / "inside.js").touch()

        root = tmp_path / "build"
        root.mkdir()
        (root / "linked").symlink_to(external)

        paths = await collect(root)

        assert root / "linked" in paths
        assert root / "linked" / "inside.js" not in paths

    @pytest.mark.asyncio
    async def test_walk_missing_directory_raises(self, tmp_path):
        """Test that walking a missing directory fails."""
        with pytest.raises(FileNotFoundError):
            await collect(tmp_path / "missing")

    @pytest.mark.asyncio
    async def test_walk_file_raises(self, tmp_path):
        """Test that walking a file fails."""
        file_path = tmp_path / "page.js"
        file_path.touch()

        with pytest.raises(NotADirectoryError):
            await collect(file_path)


class TestIsDirectory:
    """Tests for is_directory()."""

    def test_directory(self, tmp_path):
        """Test that a directory is reported as one."""
        assert is_directory(tmp_path)

    def test_file(self, tmp_path):
        """Test that a file is not a directory."""
        file_path = tmp_path / "page.js"
        file_path.touch()

        assert not is_directory(file_path)

    def test_symlink_to_directory(self, tmp_path):
        """Test that a symlink to a directory is not a directory."""
        target = tmp_path / "target"
        target.mkdir()
        link = tmp_path / "link"
        link.symlink_to(target)

        assert not is_directory(link)

    def test_missing_path_raises(self, tmp_path):
        """Test that a missing path raises instead of returning False."""
        with pytest.raises(FileNotFoundError):
            is_directory(tmp_path / "missing")
