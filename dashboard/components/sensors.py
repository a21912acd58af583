"""
Sensor cards panel: latest gas, humidity, temperature and fire status.

Use `render_panel()` with a poller snapshot; the cards show 0 while
disconnected.
"""

from typing import Any, Dict

import streamlit as st

from monitor.poller import PollerSnapshot
from components.layout import fire_status, render_sensor_card

SENSOR_CARDS = (
    ("gas", "Gas Level", "⛽", "PPM"),
    ("humidity", "Humidity", "💧", "%"),
    ("temperature", "Temperature", "🌡️", "°C"),
)


def render_panel(snapshot: PollerSnapshot) -> Dict[str, Any]:
    """
    Render the sensor cards.

    Returns:
        Dict with the values shown, for the sidebar status.
    """
    current = snapshot.current
    columns = st.columns(len(SENSOR_CARDS) + 1)

    shown: Dict[str, Any] = {}
    for col, (field, label, icon, unit) in zip(columns, SENSOR_CARDS):
        value = getattr(current, field) if current is not None else 0
        shown[field] = value
        with col:
            render_sensor_card(label, icon, value, unit)

    flame = current.flame if current is not None else 0
    icon, text, indicator = fire_status(flame)
    css_class = "fire-danger" if flame == 1 else "fire-safe"
    with columns[-1]:
        st.write(f"{icon} **Fire Status**")
        st.markdown(f'<span class="{css_class}">{text} {indicator}</span>', unsafe_allow_html=True)

    shown["flame"] = flame
    return {
        "status": "live" if current is not None else "idle",
        "values": shown,
        "fire_detected": flame == 1,
    }
