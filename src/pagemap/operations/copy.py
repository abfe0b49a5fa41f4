"""Copy serverless page output into the working build directory."""

import shutil
from pathlib import Path

from pagemap.files.build_dir import PluginBuildDir
from pagemap.output import log

SERVERLESS_PAGES_DIR = Path("serverless") / "pages"


def copy_build_files(next_build_dir: Path, plugin_build_dir: PluginBuildDir) -> Path:
    """Copy the serverless pages of a Next.js build into the build directory.

    The build directory is emptied first, so files from earlier runs never
    linger.

    Args:
        next_build_dir: Next.js build output (usually ``.next``)
        plugin_build_dir: Working build directory to copy into

    Returns:
        Path to the populated build directory

    Raises:
        FileNotFoundError: If next_build_dir has no serverless pages
    """
    source = next_build_dir / SERVERLESS_PAGES_DIR
    target = plugin_build_dir.build_dir

    log(f"Copying next pages from {source} to {target}")

    if not source.is_dir():
        raise FileNotFoundError(f"Serverless pages directory not found: {source}")

    plugin_build_dir.setup_build_dir()
    shutil.copytree(source, target, dirs_exist_ok=True)

    return target
