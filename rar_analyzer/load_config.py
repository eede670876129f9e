"""Logic for loading and merging configuration files."""

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from rar_analyzer.deep_merge import deep_merge
from rar_analyzer.resolve_assembly_reference_analyzer import (
    UNUSED_REPORT_TITLE,
    USED_REPORT_TITLE,
)

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "task_names": ["ResolveAssemblyReference"],
    "report": {
        "used_title": USED_REPORT_TITLE,
        "unused_title": UNUSED_REPORT_TITLE,
    },
    "output": {
        "sort_keys": False,
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
            logger.info("Config file %s not found, using defaults", path)
    return config
