"""Configuration file discovery and merging.

Configuration is declarative JSON only. JavaScript config files are never
executed; when one is the only config present a warning is emitted.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from ..models.cleanup_config import CleanupConfig

logger = logging.getLogger(__name__)

CONFIG_FILENAMES = (".unusedrc.json", ".unusedrc", "unused.config.json")
UNTRUSTED_CONFIG_FILENAMES = (".unusedrc.js", "unused.config.js")

# Top-level keys whose values are objects merged one level deep
NESTED_KEYS = ("dependencies", "files", "git", "analysis")
KNOWN_KEYS = ("ignore", "extensions") + NESTED_KEYS


def merge_config(defaults: Dict[str, Any], user: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow-merge user config over defaults.

    Top-level keys from the user replace defaults; nested option objects are
    merged one level deep so a user can override a single sub-option.

    Args:
        defaults: Default configuration dictionary (camelCase keys).
        user: User configuration dictionary.

    Returns:
        New merged dictionary (inputs are not modified).
    """
    merged = dict(defaults)
    for key, value in user.items():
        if key not in KNOWN_KEYS:
            logger.debug(f"Ignoring unknown config key '{key}'")
            continue
        if key in NESTED_KEYS:
            if not isinstance(value, dict):
                raise ValueError(f"Config key '{key}' must be an object")
            merged[key] = {**defaults.get(key, {}), **value}
        else:
            if not isinstance(value, list):
                raise ValueError(f"Config key '{key}' must be a list")
            merged[key] = list(value)
    return merged


def find_config_file(project_root: Path) -> Optional[Path]:
    """Return the first recognized JSON config file in the project root."""
    for filename in CONFIG_FILENAMES:
        candidate = project_root / filename
        if candidate.is_file():
            return candidate
    return None


def load_config(project_root: Path) -> CleanupConfig:
    """Load project configuration, falling back to built-in defaults.

    Each recognized file is tried in order; a file that fails to parse is
    reported and the next candidate is tried.

    Args:
        project_root: Project directory to search.

    Returns:
        Merged CleanupConfig.
    """
    defaults = CleanupConfig().to_dict()

    for filename in CONFIG_FILENAMES:
        config_path = project_root / filename
        if not config_path.is_file():
            continue
        try:
            with config_path.open(encoding="utf-8") as f:
                user_config = json.load(f)
            if not isinstance(user_config, dict):
                raise ValueError("expected a JSON object")
            config = CleanupConfig.from_dict(merge_config(defaults, user_config))
        except (OSError, ValueError) as e:
            logger.warning(f"Failed to load config from {filename}: {e}")
            continue
        logger.debug(f"Loaded config from {config_path}")
        return config

    for filename in UNTRUSTED_CONFIG_FILENAMES:
        if (project_root / filename).is_file():
            logger.warning(
                f"Ignoring {filename}: executable config files are not loaded. "
                f"Move the settings to .unusedrc.json."
            )

    return CleanupConfig.from_dict(defaults)
