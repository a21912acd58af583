"""
Shared layout helpers for dashboard components.

Provides common UI utilities for value formatting, sensor cards and styling.
"""

from typing import Optional, Union
import streamlit as st

Number = Union[int, float]


def format_reading(value: Optional[Number], unit: str = "") -> str:
    """
    Format a sensor reading for display.

    Args:
        value: Reading value; None renders as 0 like an empty card
        unit: Unit string appended after a space

    Returns:
        Formatted string, integers without decimals and floats with one
    """
    if value is None:
        value = 0
    if isinstance(value, float) and not value.is_integer():
        text = f"{value:.1f}"
    else:
        text = f"{int(value)}"
    return f"{text} {unit}".strip()


def connection_label(connected: bool) -> str:
    """Caption for the connect/disconnect toggle."""
    return "🔴 Disconnect" if connected else "🟢 Connect"


def fire_status(flame: Optional[int]) -> tuple[str, str, str]:
    """
    Map the flame flag to (icon, text, indicator).

    Args:
        flame: 1 when fire is detected, anything else is safe
    """
    if flame == 1:
        return "🔥", "FIRE!", "🚨"
    return "🚫", "SAFE", "✅"


def render_sensor_card(label: str, icon: str, value: Optional[Number], unit: str) -> None:
    """
    Render one sensor reading card.

    Args:
        label: Reading name shown above the value
        icon: Emoji shown in the card header
        value: Current reading (None while disconnected)
        unit: Unit suffix
    """
    st.metric(label=f"{icon} {label}", value=format_reading(value, unit))


def apply_custom_css() -> None:
    """Apply custom CSS styling for the sensor cards and status line."""
    st.markdown("""
    <style>
    .stMetric {
        background-color: #f0f2f6;
        border: 1px solid #e6e9ef;
        padding: 0.5rem;
        border-radius: 0.25rem;
    }

    .fire-danger {
        color: #dc3545;
        font-weight: 700;
    }

    .fire-safe {
        color: #28a745;
        font-weight: 700;
    }

    .command-status {
        margin: 0.5rem 0;
        padding: 0.5rem;
        border-radius: 0.25rem;
        background-color: #fff3cd;
    }
    </style>
    """, unsafe_allow_html=True)
