"""Path normalization and classification for build files."""

from collections.abc import Collection
from pathlib import Path
from pathlib import PurePosixPath

BUILT_IN_EXCLUDES = frozenset(
    {
        "_app.js",
        "_document.js",
        "compatLayer.js",
        "aws-lambda-compat.js",
    }
)
SOURCE_MAP_EXT = ".map"


def normalize_build_dir(build_dir: Path | str) -> Path:
    """Normalize the build directory as the caller wrote it into a page root.

    Args:
        build_dir: Absolute, relative or dot-relative build directory

    Returns:
        Relative path with redundant ``.`` segments and separators removed,
        so that ``./build`` and ``build`` both become ``build``. An absolute
        build dir loses its anchor: ``/srv/build`` becomes ``srv/build``.
        Not resolved.
    """
    path = Path(build_dir)
    if path.is_absolute():
        return Path(*path.parts[1:])
    return path


def reroot_path(file_path: Path, resolved_build_dir: Path) -> PurePosixPath:
    """Get a walked file path relative to the build directory.

    Args:
        file_path: Path emitted by the tree walker
        resolved_build_dir: Absolute, resolved build directory

    Returns:
        Platform-independent path of file_path beneath the build directory

    Raises:
        ValueError: If file_path is not inside resolved_build_dir
    """
    relative = file_path.relative_to(resolved_build_dir)
    return PurePosixPath(*relative.parts)


def is_excluded(relative_path: PurePosixPath, excludes: Collection[str]) -> bool:
    """Check if a file's base name is in the exclusion set."""
    return relative_path.name in excludes


def is_source_map(relative_path: PurePosixPath) -> bool:
    """Check if a file is a source map."""
    return relative_path.name.endswith(SOURCE_MAP_EXT)
