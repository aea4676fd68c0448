"""Configuration loading and saving for oxmigrate."""

import copy
import json
from pathlib import Path

from oxmigrate.models.directive import DirectiveKind

DEFAULT_INCLUDES = [
    "**/*.js",
    "**/*.jsx",
    "**/*.mjs",
    "**/*.cjs",
    "**/*.ts",
    "**/*.tsx",
    "**/*.mts",
    "**/*.cts",
]

DEFAULT_EXCLUDES = [
    "**/node_modules/**",
    "**/dist/**",
    "**/build/**",
    "**/coverage/**",
    "**/*.min.js",
]

DEFAULT_CONFIG: dict = {
    "version": "1.0",
    "analysis": {
        "include": DEFAULT_INCLUDES,
        "exclude": DEFAULT_EXCLUDES,
    },
    "rule": {
        "directives": [kind.keyword for kind in DirectiveKind],
        "severity": "warning",
    },
}


def default_config() -> dict:
    """Return a fresh copy of the default configuration."""
    return copy.deepcopy(DEFAULT_CONFIG)


def load_config(config_path: Path) -> dict:
    """Load an oxmigrate config.json file."""
    with open(config_path, "r", encoding="utf-8") as f:
        return json.load(f)


def load_config_or_default(config_path: Path) -> dict:
    """Load the config file if it exists, else the defaults."""
    if not config_path.exists():
        return default_config()
    return load_config(config_path)


def save_config(config: dict, config_path: Path) -> None:
    """Save configuration to config.json."""
    with open(config_path, "w", encoding="utf-8") as f:
        json.dump(config, f, indent=2)


def get_analysis_includes(config: dict) -> list[str]:
    """Get include patterns from config."""
    return config.get("analysis", {}).get("include", list(DEFAULT_INCLUDES))


def get_analysis_excludes(config: dict) -> list[str]:
    """Get exclude patterns from config."""
    return config.get("analysis", {}).get("exclude", list(DEFAULT_EXCLUDES))


def get_directive_kinds(config: dict) -> set[DirectiveKind]:
    """Get the directive kinds to report.

    Raises:
        ValueError: If the config names an unknown directive.
    """
    keywords = config.get("rule", {}).get("directives")
    if keywords is None:
        return set(DirectiveKind)
    return {DirectiveKind.from_keyword(keyword) for keyword in keywords}


def get_severity(config: dict) -> str:
    """Get the severity attached to reported diagnostics."""
    return config.get("rule", {}).get("severity", "warning")
