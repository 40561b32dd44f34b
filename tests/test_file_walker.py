"""Tests for source file discovery."""

import os
import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from unused_cleaner.models.cleanup_config import CleanupConfig
from unused_cleaner.utils.file_walker import FileWalker, matches_any, relative


def _write(path: Path, content: str = "") -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)


@pytest.fixture
def default_walker():
    config = CleanupConfig()
    return FileWalker(config.extensions, config.walker_ignore_patterns())


class TestMatchesAny:
    """Test suite for glob matching of relative paths."""

    def test_directory_glob_matches_directory_with_trailing_slash(self):
        """Test that 'dist/**' matches the dist directory itself."""
        assert matches_any("dist/", ["dist/**"])

    def test_double_star_prefix_matches_at_root(self):
        """Test that a leading '**/' also matches top-level entries."""
        assert matches_any("coverage/", ["**/coverage/**"])
        assert matches_any("pkg/coverage/", ["**/coverage/**"])
        assert matches_any("a.test.js", ["**/*.test.*"])

    def test_non_matching_path(self):
        """Test that unrelated paths do not match."""
        assert not matches_any("src/index.js", ["dist/**", "**/*.test.*"])


class TestFileWalker:
    """Test suite for FileWalker."""

    def test_filters_by_extension(self, tmp_path, default_walker):
        """Test that only configured extensions are returned."""
        _write(tmp_path / "src" / "index.ts")
        _write(tmp_path / "src" / "App.vue")
        _write(tmp_path / "README.md")
        _write(tmp_path / "package.json", "{}")

        files = [relative(tmp_path, f) for f in default_walker.walk(tmp_path)]

        assert files == ["src/App.vue", "src/index.ts"]

    def test_excludes_node_modules_and_hidden_directories(self, tmp_path, default_walker):
        """Test that node_modules and hidden directories are never entered."""
        _write(tmp_path / "index.js")
        _write(tmp_path / "node_modules" / "lodash" / "index.js")
        _write(tmp_path / ".cache" / "bundle.js")
        _write(tmp_path / "src" / ".hidden" / "secret.js")

        files = [relative(tmp_path, f) for f in default_walker.walk(tmp_path)]

        assert files == ["index.js"]

    def test_node_modules_excluded_without_ignore_patterns(self, tmp_path):
        """Test that node_modules is pruned even with an empty ignore list."""
        _write(tmp_path / "a.js")
        _write(tmp_path / "node_modules" / "dep" / "b.js")

        walker = FileWalker([".js"], [])
        files = [relative(tmp_path, f) for f in walker.walk(tmp_path)]

        assert files == ["a.js"]

    def test_default_ignores_tests_and_build_output(self, tmp_path, default_walker):
        """Test that default globs exclude test files and build directories."""
        _write(tmp_path / "src" / "util.js")
        _write(tmp_path / "src" / "util.test.js")
        _write(tmp_path / "src" / "__tests__" / "util.js")
        _write(tmp_path / "dist" / "util.js")
        _write(tmp_path / "build" / "util.js")
        _write(tmp_path / "packages" / "a" / "coverage" / "lcov.js")

        files = [relative(tmp_path, f) for f in default_walker.walk(tmp_path)]

        assert files == ["src/util.js"]

    def test_include_tests_option(self, tmp_path):
        """Test that files.includeTests brings test files back."""
        _write(tmp_path / "src" / "util.test.js")
        config = CleanupConfig()
        config.files.include_tests = True

        walker = FileWalker(config.extensions, config.walker_ignore_patterns())
        files = [relative(tmp_path, f) for f in walker.walk(tmp_path)]

        assert files == ["src/util.test.js"]

    def test_stories_excluded_by_default(self, tmp_path, default_walker):
        """Test that story files are excluded unless includeStories is set."""
        _write(tmp_path / "src" / "Button.stories.tsx")
        _write(tmp_path / "src" / "Button.tsx")

        files = [relative(tmp_path, f) for f in default_walker.walk(tmp_path)]

        assert files == ["src/Button.tsx"]

    def test_deeply_nested_tree(self, tmp_path):
        """Test traversal of a deep directory chain."""
        deep = tmp_path
        for i in range(60):
            deep = deep / f"d{i}"
        _write(deep / "leaf.js")

        walker = FileWalker([".js"])
        files = walker.walk(tmp_path)

        assert len(files) == 1
        assert files[0].name == "leaf.js"

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
    def test_does_not_follow_directory_symlink_cycle(self, tmp_path):
        """Test that a self-referential directory symlink does not hang."""
        _write(tmp_path / "src" / "a.js")
        try:
            os.symlink(tmp_path / "src", tmp_path / "src" / "loop", target_is_directory=True)
        except OSError:
            pytest.skip("cannot create symlinks here")

        walker = FileWalker([".js"])
        files = [relative(tmp_path, f) for f in walker.walk(tmp_path)]

        assert files == ["src/a.js"]

    def test_extensions_without_dot_are_normalized(self, tmp_path):
        """Test that 'js' is treated like '.js'."""
        _write(tmp_path / "a.js")
        walker = FileWalker(["js"])
        assert len(walker.walk(tmp_path)) == 1


class TestExcludes:
    """Test suite for FileWalker.excludes()."""

    def test_path_under_ignored_directory(self, default_walker):
        """Test that paths under ignored or pruned directories are excluded."""
        assert default_walker.excludes("node_modules/lodash/index.js")
        assert default_walker.excludes("dist/main.js")
        assert default_walker.excludes(".storybook/main.js")
        assert default_walker.excludes("src/__tests__/a.js")

    def test_regular_source_path(self, default_walker):
        """Test that ordinary source paths are not excluded."""
        assert not default_walker.excludes("src/components/Button.tsx")
        assert not default_walker.excludes("index.js")
