"""Asynchronous directory tree walking."""

import asyncio
import stat
from collections.abc import AsyncIterator
from pathlib import Path

from pagemap.models import WalkEntry


async def walk_tree(root: Path) -> AsyncIterator[WalkEntry]:
    """Walk a directory tree, yielding an entry for every path in it.

    The root itself is yielded first, then its contents in pre-order with
    each directory's children sorted by name. Symlinks to directories are
    yielded but not descended into. Directory listings run in a worker
    thread so the event loop stays free.

    Args:
        root: Directory to walk

    Yields:
        WalkEntry for the root and every file and directory beneath it

    Raises:
        FileNotFoundError: If root does not exist
        NotADirectoryError: If root is not a directory
        PermissionError: If a directory cannot be listed
    """
    yield WalkEntry(path=root)
    async for entry in _walk_children(root):
        yield entry


async def _walk_children(directory: Path) -> AsyncIterator[WalkEntry]:
    children = await asyncio.to_thread(_list_dir, directory)
    for child in children:
        yield WalkEntry(path=child)
        if is_directory(child):
            async for entry in _walk_children(child):
                yield entry


def is_directory(path: Path) -> bool:
    """Check if path is a directory without following symlinks.

    Raises:
        FileNotFoundError: If path does not exist
    """
    return stat.S_ISDIR(path.lstat().st_mode)


def _list_dir(directory: Path) -> list[Path]:
    return sorted(directory.iterdir())
