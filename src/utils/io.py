from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from utils.logging import get_logger

logger = get_logger(__name__)


def maybe_load_yaml(path: Optional[str | Path]) -> Dict[str, Any]:
    """Load YAML config file with fallback to empty dict."""
    if not path:
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Ignoring unreadable config file {path}: {e}")
        return {}
