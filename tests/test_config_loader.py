"""Tests for configuration file loading and merging."""

import json
import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from unused_cleaner.models.cleanup_config import CleanupConfig, DEFAULT_IGNORE
from unused_cleaner.utils.config_loader import find_config_file, load_config, merge_config


class TestMergeConfig:
    """Test suite for merge_config()."""

    def test_top_level_list_replaces_default(self):
        """Test that a user list replaces the default list entirely."""
        defaults = CleanupConfig().to_dict()
        merged = merge_config(defaults, {"extensions": [".ts"]})

        assert merged["extensions"] == [".ts"]
        assert merged["ignore"] == DEFAULT_IGNORE

    def test_nested_objects_merge_one_level(self):
        """Test that a single nested option overrides only that option."""
        defaults = CleanupConfig().to_dict()
        merged = merge_config(defaults, {"analysis": {"timeout": 5000}})

        assert merged["analysis"]["timeout"] == 5000
        assert merged["analysis"]["skipDepcheck"] is False
        assert merged["analysis"]["skipUnimported"] is False

    def test_inputs_not_mutated(self):
        """Test that merge_config does not modify its arguments."""
        defaults = CleanupConfig().to_dict()
        snapshot = json.dumps(defaults, sort_keys=True)
        merge_config(defaults, {"git": {"commitMessage": "x"}})

        assert json.dumps(defaults, sort_keys=True) == snapshot

    def test_unknown_keys_ignored(self):
        """Test that unknown keys are dropped."""
        merged = merge_config(CleanupConfig().to_dict(), {"plugins": ["x"]})
        assert "plugins" not in merged

    def test_wrong_nested_type(self):
        """Test that a non-object nested section is rejected."""
        with pytest.raises(ValueError):
            merge_config(CleanupConfig().to_dict(), {"git": "main"})


class TestLoadConfig:
    """Test suite for load_config()."""

    def test_defaults_without_file(self, tmp_path):
        """Test that defaults are returned when no config exists."""
        assert load_config(tmp_path) == CleanupConfig()

    def test_loads_unusedrc_json(self, tmp_path):
        """Test loading .unusedrc.json with nested overrides."""
        (tmp_path / ".unusedrc.json").write_text(
            json.dumps(
                {
                    "ignore": ["vendor/**"],
                    "dependencies": {"skipDevDependencies": True},
                    "git": {"commitMessage": "chore: cleanup"},
                    "analysis": {"timeout": 1000, "skipDepcheck": True},
                }
            )
        )

        config = load_config(tmp_path)

        assert config.ignore == ["vendor/**"]
        assert config.dependencies.skip_dev_dependencies is True
        assert config.dependencies.custom_ignore == ["@types/*"]
        assert config.git.commit_message == "chore: cleanup"
        assert config.git.default_branch == "main"
        assert config.analysis.timeout == 1000
        assert config.analysis.skip_depcheck is True

    def test_filename_precedence(self, tmp_path):
        """Test that .unusedrc.json wins over unused.config.json."""
        (tmp_path / ".unusedrc.json").write_text(json.dumps({"extensions": [".ts"]}))
        (tmp_path / "unused.config.json").write_text(json.dumps({"extensions": [".js"]}))

        assert find_config_file(tmp_path).name == ".unusedrc.json"
        assert load_config(tmp_path).extensions == [".ts"]

    def test_invalid_file_falls_through(self, tmp_path, caplog):
        """Test that a broken config is reported and the next one is used."""
        (tmp_path / ".unusedrc.json").write_text("{ broken")
        (tmp_path / "unused.config.json").write_text(json.dumps({"extensions": [".vue"]}))

        config = load_config(tmp_path)

        assert config.extensions == [".vue"]
        assert "Failed to load config from .unusedrc.json" in caplog.text

    @pytest.mark.parametrize(
        "user_config",
        [
            {"dependencies": {"customIgnore": 5}},
            {"analysis": {"timeout": None}},
            {"analysis": {"timeout": "fast"}},
            {"files": {"includeTests": "yes"}},
            {"git": {"commitMessage": ["a"]}},
            {"extensions": [".js", 3]},
        ],
    )
    def test_wrongly_typed_value_falls_through(self, tmp_path, caplog, user_config):
        """Test that a value of the wrong type is reported and the next file is used."""
        (tmp_path / ".unusedrc.json").write_text(json.dumps(user_config))
        (tmp_path / "unused.config.json").write_text(json.dumps({"extensions": [".vue"]}))

        config = load_config(tmp_path)

        assert config.extensions == [".vue"]
        assert "Failed to load config from .unusedrc.json" in caplog.text

    def test_wrongly_typed_only_config_uses_defaults(self, tmp_path, caplog):
        """Test that a lone invalid config degrades to defaults with a warning."""
        (tmp_path / ".unusedrc.json").write_text(json.dumps({"analysis": {"timeout": None}}))

        assert load_config(tmp_path) == CleanupConfig()
        assert "must be an integer" in caplog.text

    def test_js_config_is_never_executed(self, tmp_path, caplog):
        """Test that executable configs are ignored with a warning."""
        marker = tmp_path / "executed"
        (tmp_path / "unused.config.js").write_text(
            f"require('fs').writeFileSync({json.dumps(str(marker))}, 'x');\n"
            "module.exports = { extensions: ['.js'] };\n"
        )

        config = load_config(tmp_path)

        assert config == CleanupConfig()
        assert not marker.exists()
        assert "executable config files are not loaded" in caplog.text
