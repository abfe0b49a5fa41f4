"""Discovery options and their on-disk JSON form."""

import json
from dataclasses import dataclass
from dataclasses import field
from pathlib import Path
from typing import Self

from platformdirs import user_config_path

from pagemap.exceptions import ConfigValidationError
from pagemap.files.paths import BUILT_IN_EXCLUDES

WILDCARD_PAGE = "*"


@dataclass
class DiscoveryOptions:
    """Options for a page discovery run."""

    page_config: dict[str, dict] = field(default_factory=dict)  # page_id -> overrides
    additional_excludes: list[str] = field(default_factory=list)
    routes: list[dict] = field(default_factory=list)  # {"src": page_id, ...}

    @property
    def excludes(self) -> frozenset[str]:
        """Built-in excluded file names plus additional_excludes."""
        return BUILT_IN_EXCLUDES | frozenset(self.additional_excludes)

    @classmethod
    def default_path(cls) -> Path:
        """Get default options file location using platformdirs."""
        return user_config_path("pagemap") / "config.json"

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        return {
            "page_config": self.page_config,
            "additional_excludes": self.additional_excludes,
            "routes": self.routes,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Self:
        """Create from dict loaded from JSON."""
        if not isinstance(data, dict):
            raise ConfigValidationError("Options must be a JSON object")

        page_config = data.get("page_config", {})
        if not isinstance(page_config, dict):
            raise ConfigValidationError("'page_config' must be an object")
        for page_id, overrides in page_config.items():
            if not isinstance(overrides, dict):
                raise ConfigValidationError(
                    f"'page_config' entry for {page_id!r} must be an object"
                )

        additional_excludes = data.get("additional_excludes", [])
        if not isinstance(additional_excludes, list) or not all(
            isinstance(name, str) for name in additional_excludes
        ):
            raise ConfigValidationError(
                "'additional_excludes' must be a list of file names"
            )

        routes = data.get("routes", [])
        if not isinstance(routes, list):
            raise ConfigValidationError("'routes' must be a list")
        for index, route in enumerate(routes):
            if not isinstance(route, dict) or "src" not in route:
                raise ConfigValidationError(
                    f"Route {index} must be an object with a 'src' key"
                )

        return cls(
            page_config=page_config,
            additional_excludes=additional_excludes,
            routes=routes,
        )

    @classmethod
    def load(cls, path: Path | None = None) -> Self:
        """Load options from JSON file.

        Args:
            path: Path to options file. If None, uses default location, and
                a missing default file gives default options.

        Raises:
            FileNotFoundError: If an explicit path does not exist
            ConfigValidationError: If the file is not valid options JSON
        """
        if path is None:
            path = cls.default_path()
            if not path.exists():
                return cls()

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except UnicodeDecodeError as e:
            raise ConfigValidationError(f"Options file {path} is not UTF-8: {e}") from e
        except json.JSONDecodeError as e:
            raise ConfigValidationError(f"Invalid JSON in {path}: {e}") from e
        return cls.from_dict(data)
