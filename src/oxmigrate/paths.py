"""Centralized path management for oxmigrate output files."""

from pathlib import Path

# Directory name for oxmigrate outputs
OXMIGRATE_DIR = ".oxmigrate"

# File names within the .oxmigrate directory
CONFIG_FILE = "config.json"
RESULTS_FILE = "results.json"


def get_oxmigrate_dir(project_path: Path) -> Path:
    """Get the .oxmigrate directory path for a project."""
    return project_path / OXMIGRATE_DIR


def ensure_oxmigrate_dir(project_path: Path) -> Path:
    """Ensure .oxmigrate directory exists and return its path."""
    oxmigrate_dir = get_oxmigrate_dir(project_path)
    oxmigrate_dir.mkdir(parents=True, exist_ok=True)
    return oxmigrate_dir


def get_config_path(project_path: Path) -> Path:
    """Get the config.json path for a project."""
    return get_oxmigrate_dir(project_path) / CONFIG_FILE


def get_results_path(project_path: Path) -> Path:
    """Get the results.json path for a project."""
    return get_oxmigrate_dir(project_path) / RESULTS_FILE
