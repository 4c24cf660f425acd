"""Configuration loading for Inkpot.

Settings live in an optional ``inkpot.yaml`` at the project root. Values
found there are merged over DEFAULT_CONFIG.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from .renderers import DEFAULT_PLUGINS

CONFIG_FILENAME = "inkpot.yaml"

DEFAULT_CONFIG: dict[str, Any] = {
    "posts_dir": "posts",
    "markdown_plugins": list(DEFAULT_PLUGINS),
    "highlight": True,
}


def load_config(project_root: Path) -> dict[str, Any]:
    """Load configuration from inkpot.yaml.

    Args:
        project_root: Root directory of the project.

    Returns:
        Dictionary containing configuration values, with defaults applied.

    Raises:
        ValueError: If ``highlight`` is not a YAML boolean.
    """
    config_path = project_root / CONFIG_FILENAME
    config = {**DEFAULT_CONFIG, "markdown_plugins": list(DEFAULT_CONFIG["markdown_plugins"])}
    if config_path.exists():
        with open(config_path, encoding="utf-8") as f:
            loaded = yaml.safe_load(f) or {}
            if isinstance(loaded, dict):
                config.update(loaded)
    if not isinstance(config["highlight"], bool):
        raise ValueError(
            f"highlight in {config_path} must be true or false, "
            f"got {config['highlight']!r}"
        )
    return config
