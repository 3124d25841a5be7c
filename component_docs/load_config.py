"""Logic for loading and merging configuration files."""

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from component_docs.deep_merge import deep_merge

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "api_root": "/api",
    "arrow": " → ",
    "section_titles": {
        "properties": "Properties",
        "methods": "Methods",
        "fields": "Fields",
        "events": "Events",
        "derived_types": "Derived Types",
        "see_also": "See Also",
        "global_settings": "Global Settings",
        "inheritance": "Inheritance",
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
            logger.warning("Config file %s not found; using defaults", p)
    return config
