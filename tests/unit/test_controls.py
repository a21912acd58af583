"""Tests for the control panel stub."""

import pytest

from config.config import CONTROL_COMMANDS
from monitor.controls import CONTROL_ACTIONS, WAITING_MESSAGE, ControlPanel


def test_panel_waits_for_first_command():
    panel = ControlPanel()

    assert panel.last_command is None
    assert panel.status_text == WAITING_MESSAGE


@pytest.mark.parametrize("command", CONTROL_COMMANDS)
def test_every_command_is_reported_unprocessable(command):
    panel = ControlPanel()

    status = panel.send_command(command)

    assert panel.last_command == command
    assert f'"{command}"' in status
    assert "cannot be processed" in status
    assert panel.status_text == status


def test_last_command_wins():
    panel = ControlPanel()
    panel.send_command("fan on")
    panel.send_command("close door")

    assert panel.last_command == "close door"
    assert "close door" in panel.status_text


def test_unknown_command_raises():
    panel = ControlPanel()

    with pytest.raises(ValueError):
        panel.send_command("self destruct")
    assert panel.last_command is None


def test_actions_cover_configured_commands():
    assert tuple(action.command for action in CONTROL_ACTIONS) == CONTROL_COMMANDS
