"""Data models for pagemap."""

from dataclasses import dataclass
from dataclasses import field
from pathlib import Path
from pathlib import PurePosixPath


@dataclass(frozen=True)
class WalkEntry:
    """A single entry emitted while walking a build directory."""

    path: Path  # Absolute or resolved path of a file or directory


@dataclass(frozen=True)
class PageDescriptor:
    """A deployable page found in a build directory."""

    page_path: Path  # Relative, rooted at the build dir as the caller wrote it
    relative_path: PurePosixPath  # Path beneath the build dir
    routes: list[dict] = field(default_factory=list)
    serverless_function_overrides: dict = field(default_factory=dict)

    @property
    def page_id(self) -> str:
        """Routing key: path beneath the build dir without its extension.

        ``index.js`` -> ``index``, ``foo/bar.js`` -> ``foo/bar``.
        """
        return self.relative_path.with_suffix("").as_posix()

    @property
    def page_name(self) -> str:
        """Last segment of page_id."""
        return self.relative_path.stem

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        return {
            "page_id": self.page_id,
            "page_name": self.page_name,
            "page_path": str(self.page_path),
            "routes": [dict(r) for r in self.routes],
            "serverless_function_overrides": dict(
                self.serverless_function_overrides
            ),
        }
