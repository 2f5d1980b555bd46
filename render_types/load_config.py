"""Logic for loading and merging configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from render_types.deep_merge import deep_merge

DEFAULT_CONFIG: dict[str, Any] = {
    "links": {
        "api_root": "/docs/extensions/reference",
        "strip_prefix": "chrome.",
        "anchor_prefix": "type-",
    },
    "output": {
        "indent": 2,
    },
    "logging": {
        "level": "WARNING",
    },
    "skip": [],
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults.

    A missing file is an error; no path means defaults only.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
        if not isinstance(user_config, dict):
            msg = f"Config file must contain a mapping: {path}"
            raise ValueError(msg)
        config = deep_merge(config, user_config)
    return config
