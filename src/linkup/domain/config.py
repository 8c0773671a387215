from __future__ import annotations

"""
Configuration Domain Management.

Provides the default runtime configuration for a validation run and loads
user overrides from JSON files. Missing or corrupt files fall back to the
defaults.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
DEFAULT_PROBE_TIMEOUT = 2.0
DEFAULT_MAX_WORKERS = 8
DEFAULT_DOCUMENT_EXTENSIONS = [".html", ".htm"]
DEFAULT_EXCLUDE_PATTERNS = [
    r"^(\.git|\.hg|\.svn|__pycache__|node_modules)$",
    r"^\.",
]


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Input
        "site_path": os.getcwd(),
        "document_extensions": list(DEFAULT_DOCUMENT_EXTENSIONS),
        "exclude_patterns": list(DEFAULT_EXCLUDE_PATTERNS),

        # External probing
        "check_external": True,
        "probe_timeout": DEFAULT_PROBE_TIMEOUT,
        "max_workers": DEFAULT_MAX_WORKERS,
        "user_agent": "",
    }


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration overrides from a JSON file merged over the defaults.

    Args:
        path: Location of the JSON document. None returns the defaults.

    Returns:
        Dict[str, Any]: Merged configuration (unvalidated).
    """
    config = get_default_config()
    if not path:
        return config

    if not os.path.exists(path):
        logger.warning(f"Configuration file not found: {path}. Using defaults.")
        return config

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning(f"Failed to read configuration '{path}': {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning(f"Configuration '{path}' is not a JSON object. Using defaults.")
        return config

    config.update(data)
    logger.debug(f"Configuration loaded from {path}")
    return config
