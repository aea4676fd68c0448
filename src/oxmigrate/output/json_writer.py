"""JSON output writers for config and results."""

import json
from pathlib import Path

from oxmigrate.config import default_config
from oxmigrate.models.results import RunResults


def write_default_config(output_path: Path) -> None:
    """Write a config.json holding the default settings."""
    config = default_config()
    config["$schema"] = "https://oxmigrate.dev/schema/config.json"

    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(config, f, indent=2)


def write_results(results: RunResults, output_path: Path) -> None:
    """Write the results.json file."""
    data = results.to_dict()

    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)


def load_results(results_path: Path) -> dict:
    """Load a results.json file."""
    with open(results_path, "r", encoding="utf-8") as f:
        return json.load(f)
