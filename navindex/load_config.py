"""Logic for loading the YAML configuration."""

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from navindex.deep_merge import deep_merge

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "path_separator": "::",
    "workers": 4,
    "exclude_modules": [],
    "summary": {
        "max_length": 0,
    },
    "search": {
        "default_limit": 20,
        "max_limit": 200,
    },
    "output": {
        "sidebar_filename": "sidebar-items.js",
        "index_filename": "navindex.json",
        "report_filename": "build_report.json",
    },
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = deep_merge(config, user_config)
        else:
            logger.warning("Config file %s not found, using defaults", p)
    return config
