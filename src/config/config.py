"""Project-wide single-source configuration constants for the sensor dashboard."""

import os

# ------ Config file override -------
CONFIG_ENV_VAR: str = "SENSOR_DASHBOARD_CONFIG"  # path to optional YAML overrides
CONFIG_PATH: str | None = os.getenv(CONFIG_ENV_VAR)

# ------ Polling -------
POLL_INTERVAL_SEC: float = 1.0     # fetch once per second while connected
REQUEST_TIMEOUT_SEC: float = 5.0   # per-request HTTP timeout
DEFAULT_API_URL: str = ""          # the URL input starts empty

# ------ History -------
HISTORY_CAPACITY: int = 10         # samples kept for the charts (FIFO)

# ------ Sensor readings -------
FLAME_DETECTED: int = 1            # flame flag value that means fire

# ------ Clock -------
CLOCK_TICK_SEC: float = 1.0
LOCALE: str = "id"                 # "id" | "en"; month names for the date line

# ------ Control panel -------
CONTROL_COMMANDS: tuple[str, ...] = ("fan on", "fan off", "open door", "close door")

# ------ Logging -------
LOG_LEVEL: str = "INFO"
