"""Logic for loading and merging configuration files."""

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from anchor_normalizer.deep_merge import deep_merge

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "files": {
        "extensions": [".md"],
        "encoding": "utf-8",
        "exclude_dirs": [],
    },
    "output": {
        "line_terminator": "\n",
    },
}

# section -> key -> expected type
SCHEMA: dict[str, dict[str, type]] = {
    "files": {"extensions": list, "encoding": str, "exclude_dirs": list},
    "output": {"line_terminator": str},
}


def validate_config(config: dict[str, Any], source: Path) -> None:
    """Reject sections and values of the wrong type."""
    for section, keys in SCHEMA.items():
        values = config.get(section)
        if not isinstance(values, dict):
            msg = f"Configuration section '{section}' must be a mapping: {source}"
            raise SystemExit(msg)
        for key, expected in keys.items():
            value = values.get(key)
            if not isinstance(value, expected):
                msg = (
                    f"Configuration value '{section}.{key}' must be a "
                    f"{expected.__name__}: {source}"
                )
                raise SystemExit(msg)
            if expected is list and not all(isinstance(v, str) for v in value):
                msg = (
                    f"Configuration value '{section}.{key}' must list strings: "
                    f"{source}"
                )
                raise SystemExit(msg)


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults.

    'files.exclude_dirs' adds to the defaults instead of replacing them.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            if not isinstance(user_config, dict):
                msg = f"Configuration must be a mapping: {p}"
                raise SystemExit(msg)
            config = deep_merge(config, user_config)
            validate_config(config, p)
            excluded = set(DEFAULT_CONFIG["files"]["exclude_dirs"])
            excluded.update(config["files"]["exclude_dirs"])
            config["files"]["exclude_dirs"] = sorted(excluded)
        else:
            logger.warning("Config file %s not found, using defaults.", p)
    return config
