"""Page discovery over a build output directory."""

from collections.abc import Callable
from dataclasses import replace
from pathlib import Path
from pathlib import PurePosixPath

from pagemap.config import WILDCARD_PAGE
from pagemap.config import DiscoveryOptions
from pagemap.files.paths import is_excluded
from pagemap.files.paths import is_source_map
from pagemap.files.paths import normalize_build_dir
from pagemap.files.paths import reroot_path
from pagemap.files.walk import is_directory
from pagemap.files.walk import walk_tree
from pagemap.models import PageDescriptor
from pagemap.output import log


async def collect_build_files(build_dir: Path) -> list[Path]:
    """Collect paths of all files under build_dir in walk order.

    Directories are queried with is_directory and dropped. Walker and
    filesystem errors propagate.
    """
    build_files = []
    async for entry in walk_tree(build_dir):
        if not is_directory(entry.path):
            build_files.append(entry.path)
    return build_files


def page_filters(options: DiscoveryOptions) -> list[Callable[[PurePosixPath], bool]]:
    """Build the ordered predicates a file must pass to become a page."""
    excludes = options.excludes
    return [
        lambda p: not is_excluded(p, excludes),
        lambda p: not is_source_map(p),
    ]


def match_routes(page_id: str, routes: list[dict]) -> list[dict]:
    """Get route params for every route whose src is page_id, in order."""
    return [
        {k: v for k, v in route.items() if k != "src"}
        for route in routes
        if route["src"] == page_id
    ]


def merge_overrides(page_id: str, page_config: dict[str, dict]) -> dict:
    """Merge wildcard overrides with page-specific ones (page wins)."""
    return {
        **page_config.get(WILDCARD_PAGE, {}),
        **page_config.get(page_id, {}),
    }


async def discover_pages(
    build_dir: Path | str, options: DiscoveryOptions | None = None
) -> list[PageDescriptor]:
    """Discover deployable pages in a build output directory.

    Args:
        build_dir: Build output directory (absolute, relative or
            dot-relative). Each page_path starts with this path as
            written, normalized and made relative.
        options: Page config overrides, extra excluded file names and
            route table. Defaults to empty options.

    Returns:
        PageDescriptors in walk order, with routes and
        serverless_function_overrides attached.

    Raises:
        FileNotFoundError: If build_dir does not exist
        NotADirectoryError: If build_dir is not a directory
        PermissionError: If part of the tree cannot be read
    """
    if options is None:
        options = DiscoveryOptions()

    page_root = normalize_build_dir(build_dir)
    resolved_build_dir = Path(build_dir).resolve()

    build_files = await collect_build_files(resolved_build_dir)

    filters = page_filters(options)
    pages = []
    for file_path in build_files:
        relative_path = reroot_path(file_path, resolved_build_dir)
        if not all(keep(relative_path) for keep in filters):
            continue

        page = PageDescriptor(
            page_path=page_root / relative_path,
            relative_path=relative_path,
        )
        page = replace(
            page,
            routes=match_routes(page.page_id, options.routes),
            serverless_function_overrides=merge_overrides(
                page.page_id, options.page_config
            ),
        )
        pages.append(page)

    log(f"Found {len(pages)} next page(s)")

    return pages
