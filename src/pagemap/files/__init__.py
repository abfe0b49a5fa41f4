"""Filesystem operations for pagemap."""

from pagemap.files.build_dir import PluginBuildDir
from pagemap.files.paths import BUILT_IN_EXCLUDES
from pagemap.files.paths import SOURCE_MAP_EXT
from pagemap.files.walk import is_directory
from pagemap.files.walk import walk_tree

__all__ = [
    "BUILT_IN_EXCLUDES",
    "SOURCE_MAP_EXT",
    "PluginBuildDir",
    "is_directory",
    "walk_tree",
]
