"""
History charts panel: one line chart per reading over the rolling window.

Charts are plain matplotlib figures built from the sample history, so they
can be tested without a running Streamlit server.
"""

from typing import Any, Dict, List, Sequence

import streamlit as st
import matplotlib.pyplot as plt

from monitor.poller import PollerSnapshot
from monitor.sample import Sample

# (field, title, series label, line color)
CHART_SPECS = (
    ("gas", "Gas Level History", "Gas Level (PPM)", "#ff6384"),
    ("temperature", "Temperature History", "Temperature (°C)", "#ff9f40"),
    ("humidity", "Humidity History", "Humidity (%)", "#4bc0c0"),
)


def _build_series(samples: Sequence[Sample], field: str) -> tuple[List[int], List[float]]:
    """X positions are 1-based arrival indices within the window."""
    xs = list(range(1, len(samples) + 1))
    ys = [getattr(sample, field) for sample in samples]
    return xs, ys


def _render_history_chart(samples: Sequence[Sample], field: str, title: str, label: str, color: str) -> plt.Figure:
    """
    Create a line chart for one reading.

    Args:
        samples: History window, oldest first
        field: Sample attribute to plot
        title: Chart title
        label: Legend label
        color: Line color

    Returns:
        Matplotlib figure
    """
    fig, ax = plt.subplots(figsize=(6, 3))

    if not samples:
        ax.text(0.5, 0.5, "No history yet",
                ha="center", va="center", transform=ax.transAxes)
        ax.set_title(title)
        return fig

    xs, ys = _build_series(samples, field)
    ax.plot(xs, ys, label=label, color=color, linewidth=2, marker="o")
    ax.fill_between(xs, ys, alpha=0.2, color=color)

    ax.set_title(title)
    ax.set_ylim(bottom=min(0, min(ys)))
    ax.set_xticks(xs)
    ax.grid(True, alpha=0.3)
    ax.legend()

    fig.tight_layout()
    return fig


def render_panel(snapshot: PollerSnapshot) -> Dict[str, Any]:
    """
    Render the history charts; nothing is drawn until the first sample.

    Returns:
        Dictionary with panel status and point count.
    """
    samples = snapshot.history
    if not samples:
        return {"status": "no_history", "points": 0}

    st.subheader("📊 Sensor History")
    columns = st.columns(len(CHART_SPECS))
    for col, (field, title, label, color) in zip(columns, CHART_SPECS):
        fig = _render_history_chart(samples, field, title, label, color)
        with col:
            st.pyplot(fig)
        plt.close(fig)

    return {
        "status": "success",
        "points": len(samples),
        "capacity": snapshot.capacity,
    }
