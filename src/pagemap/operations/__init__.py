"""High-level operations for pagemap."""

from pagemap.operations.copy import copy_build_files
from pagemap.operations.discover import discover_pages

__all__ = [
    "copy_build_files",
    "discover_pages",
]
