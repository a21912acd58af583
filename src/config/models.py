"""Configuration models and data structures."""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from config.config import (
    CONFIG_PATH,
    DEFAULT_API_URL,
    HISTORY_CAPACITY,
    LOCALE,
    LOG_LEVEL,
    POLL_INTERVAL_SEC,
    REQUEST_TIMEOUT_SEC,
)
from utils.io import maybe_load_yaml
from utils.logging import get_logger

logger = get_logger(__name__)


def _positive(value: float) -> bool:
    return value > 0


def _override(
    section: Dict[str, Any],
    key: str,
    cast: Callable[[Any], Any],
    default: Any,
    valid: Optional[Callable[[Any], bool]] = None,
) -> Any:
    """Read one override, keeping the default when the value is unusable."""
    if key not in section:
        return default
    raw = section[key]
    try:
        if raw is None:
            raise TypeError("value is null")
        value = cast(raw)
    except (TypeError, ValueError) as e:
        logger.warning(f"Ignoring dashboard.{key}={raw!r}: {e}; using {default!r}")
        return default
    if valid is not None and not valid(value):
        logger.warning(f"Ignoring dashboard.{key}={raw!r}: out of range; using {default!r}")
        return default
    return value


@dataclass
class DashboardConfig:
    """Dashboard configuration with YAML override support."""
    poll_interval_sec: float = POLL_INTERVAL_SEC
    history_capacity: int = HISTORY_CAPACITY
    request_timeout_sec: float = REQUEST_TIMEOUT_SEC
    default_api_url: str = DEFAULT_API_URL
    locale: str = LOCALE
    log_level: str = LOG_LEVEL

    def __post_init__(self):
        if self.poll_interval_sec <= 0:
            raise ValueError(f"poll_interval_sec must be positive, got {self.poll_interval_sec}")
        if self.history_capacity < 1:
            raise ValueError(f"history_capacity must be at least 1, got {self.history_capacity}")

    @classmethod
    def from_yaml(cls, yaml_path: Optional[str] = CONFIG_PATH) -> 'DashboardConfig':
        """Create config with optional YAML overrides from the `dashboard` section.

        A key with a missing, null or malformed value keeps its default.
        """
        yaml_config = maybe_load_yaml(yaml_path)
        section = yaml_config.get('dashboard', {}) if isinstance(yaml_config, dict) else {}
        if not isinstance(section, dict):
            section = {}

        return cls(
            poll_interval_sec=_override(section, 'poll_interval_sec', float, POLL_INTERVAL_SEC, _positive),
            history_capacity=_override(section, 'history_capacity', int, HISTORY_CAPACITY, _positive),
            request_timeout_sec=_override(section, 'request_timeout_sec', float, REQUEST_TIMEOUT_SEC, _positive),
            default_api_url=_override(section, 'default_api_url', str, DEFAULT_API_URL),
            locale=_override(section, 'locale', str, LOCALE),
            log_level=_override(section, 'log_level', str, LOG_LEVEL),
        )
