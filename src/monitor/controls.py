"""Smart control panel stub.

No command channel exists: every action only records the attempted command
and reports that it cannot be processed.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from config.config import CONTROL_COMMANDS
from utils.logging import get_logger

logger = get_logger(__name__)

WAITING_MESSAGE = "Waiting for command..."


@dataclass(frozen=True)
class ControlAction:
    command: str
    label: str
    icon: str


CONTROL_ACTIONS: Tuple[ControlAction, ...] = (
    ControlAction("fan on", "Turn Fan On", "🌬️"),
    ControlAction("fan off", "Turn Fan Off", "⭕"),
    ControlAction("open door", "Open Door", "🚪"),
    ControlAction("close door", "Close Door", "🔒"),
)


def unprocessable_message(command: str) -> str:
    return f'Command "{command}" cannot be processed - command channel is not active ⚠️'


class ControlPanel:
    """Holds the status line shown under the control buttons."""

    def __init__(self):
        self.last_command: Optional[str] = None
        self.status: str = ""

    @property
    def status_text(self) -> str:
        return self.status or WAITING_MESSAGE

    def send_command(self, command: str) -> str:
        if command not in CONTROL_COMMANDS:
            raise ValueError(f"Unknown control command: {command!r}")
        self.last_command = command
        self.status = unprocessable_message(command)
        logger.warning(f"Control command '{command}' dropped: no command channel")
        return self.status
