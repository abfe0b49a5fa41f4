"""Tests for build file path helpers."""

from pathlib import Path
from pathlib import PurePosixPath

import pytest

from pagemap.files.paths import BUILT_IN_EXCLUDES
from pagemap.files.paths import is_excluded
from pagemap.files.paths import is_source_map
from pagemap.files.paths import normalize_build_dir
from pagemap.files.paths import reroot_path


class TestNormalizeBuildDir:
    """Tests for normalize_build_dir()."""

    def test_strips_leading_dot(self):
        """Test that ./build and build normalize the same way."""
        assert normalize_build_dir("./build") == normalize_build_dir("build")
        assert normalize_build_dir("./build") == Path("build")

    def test_absolute_path_loses_anchor(self):
        """Test that absolute build dirs become relative page roots."""
        page_root = normalize_build_dir("/srv/app/build")

        assert page_root == Path("srv/app/build")
        assert not page_root.is_absolute()


class TestRerootPath:
    """Tests for reroot_path()."""

    def test_nested_file(self):
        """Test a nested file's path beneath the build dir."""
        build_dir = Path("/srv/app/build")

        relative = reroot_path(build_dir / "one" / "two" / "page.js", build_dir)

        assert relative == PurePosixPath("one/two/page.js")

    def test_build_dir_name_recurring_below_root(self):
        """Test a nested directory named like the build dir is kept."""
        build_dir = Path("/srv/build")

        relative = reroot_path(build_dir / "build" / "page.js", build_dir)

        assert relative == PurePosixPath("build/page.js")

    def test_path_outside_build_dir_raises(self):
        """Test that paths outside the build dir are rejected."""
        with pytest.raises(ValueError):
            reroot_path(Path("/elsewhere/page.js"), Path("/srv/build"))


class TestFilters:
    """Tests for is_excluded() and is_source_map()."""

    @pytest.mark.parametrize("name", sorted(BUILT_IN_EXCLUDES))
    def test_built_in_excludes_at_any_depth(self, name):
        """Test built-in excludes match by base name only."""
        assert is_excluded(PurePosixPath(name), BUILT_IN_EXCLUDES)
        assert is_excluded(PurePosixPath("a/b") / name, BUILT_IN_EXCLUDES)

    def test_exclude_is_exact_match(self):
        """Test that similar names are not excluded."""
        assert not is_excluded(PurePosixPath("my_app.js"), BUILT_IN_EXCLUDES)
        assert not is_excluded(PurePosixPath("_app.jsx"), BUILT_IN_EXCLUDES)

    def test_source_map(self):
        """Test that .map files are detected."""
        assert is_source_map(PurePosixPath("blog/post.js.map"))
        assert not is_source_map(PurePosixPath("sitemap.js"))
