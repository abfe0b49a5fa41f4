"""Discover deployable pages in a Next.js serverless build."""

from pagemap.config import DiscoveryOptions
from pagemap.files.build_dir import PluginBuildDir
from pagemap.models import PageDescriptor
from pagemap.operations import copy_build_files
from pagemap.operations import discover_pages

__version__ = "0.1.0"

__all__ = [
    "DiscoveryOptions",
    "PageDescriptor",
    "PluginBuildDir",
    "copy_build_files",
    "discover_pages",
]
