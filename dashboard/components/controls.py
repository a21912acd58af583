"""
Smart control panel component.

Four command buttons whose only effect is the status line: no command
channel is wired up.
"""

from typing import Any, Dict, Optional

import streamlit as st

from monitor.controls import CONTROL_ACTIONS, ControlPanel


def render_panel(panel: ControlPanel) -> Dict[str, Any]:
    """Render the control buttons and the command status line."""
    st.subheader("🎛️ Smart Control Panel")

    pressed: Optional[str] = None
    columns = st.columns(len(CONTROL_ACTIONS))
    for col, action in zip(columns, CONTROL_ACTIONS):
        with col:
            if st.button(f"{action.icon} {action.label}", key=f"control_{action.command}", use_container_width=True):
                pressed = action.command

    if pressed is not None:
        panel.send_command(pressed)

    st.markdown(f'<div class="command-status">📡 {panel.status_text}</div>', unsafe_allow_html=True)

    return {
        "pressed": pressed,
        "last_command": panel.last_command,
        "status": panel.status_text,
    }
