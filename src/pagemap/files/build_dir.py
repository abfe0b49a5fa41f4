"""Working build directory that pages are copied into."""

import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar


@dataclass
class PluginBuildDir:
    """Build directory beneath base_dir, holding copied page files."""

    BUILD_DIR_NAME: ClassVar[str] = "sls-next-build"

    base_dir: Path

    @property
    def build_dir(self) -> Path:
        """Get the build directory path."""
        return self.base_dir / self.BUILD_DIR_NAME

    def setup_build_dir(self) -> None:
        """Empty the build directory, creating it if needed."""
        self.remove_build_dir()
        self.build_dir.mkdir(parents=True)

    def remove_build_dir(self) -> None:
        """Remove the build directory and its contents if present."""
        if self.build_dir.is_symlink() or self.build_dir.is_file():
            self.build_dir.unlink()
        elif self.build_dir.exists():
            shutil.rmtree(self.build_dir)
