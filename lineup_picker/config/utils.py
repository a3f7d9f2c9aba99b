"""
Configuration Utilities

Helper functions for exporting and comparing lineup configurations.
"""

import json
from pathlib import Path
from typing import Any, Dict

from loguru import logger

from .settings import LineupConfig


def export_config_to_json(config: LineupConfig, output_path: Path) -> None:
    """
    Export configuration to JSON file

    Args:
        config: LineupConfig instance to export
        output_path: Path where to save the JSON file
    """
    config_dict = config.model_dump()

    with open(output_path, "w") as f:
        json.dump(config_dict, f, indent=2, default=str)

    logger.info(f"✅ Configuration exported to {output_path}")


def compare_configs(config1: LineupConfig, config2: LineupConfig) -> Dict[str, Any]:
    """
    Compare two configurations and return differences

    Args:
        config1: First configuration
        config2: Second configuration

    Returns:
        Dictionary of differences keyed by dotted path
    """
    dict1 = config1.model_dump()
    dict2 = config2.model_dump()

    differences = {}

    def compare_dicts(d1, d2, path=""):
        for key in sorted(set(d1.keys()) | set(d2.keys())):
            current_path = f"{path}.{key}" if path else key

            if key not in d1:
                differences[current_path] = {"config1": "<missing>", "config2": d2[key]}
            elif key not in d2:
                differences[current_path] = {"config1": d1[key], "config2": "<missing>"}
            elif isinstance(d1[key], dict) and isinstance(d2[key], dict):
                compare_dicts(d1[key], d2[key], current_path)
            elif d1[key] != d2[key]:
                differences[current_path] = {"config1": d1[key], "config2": d2[key]}

    compare_dicts(dict1, dict2)
    return differences
