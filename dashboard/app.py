"""
Smart Home Sensor Dashboard - Streamlit Application

Polls a user-supplied endpoint for gas, humidity, temperature and flame
readings, shows the latest values and charts the recent history.
"""

import streamlit as st
import sys
from pathlib import Path
import time
from typing import Callable, Optional
import matplotlib
matplotlib.use('Agg')  # Use non-interactive backend for Streamlit

from apscheduler.schedulers.background import BackgroundScheduler
from streamlit import runtime
from streamlit.runtime.scriptrunner import get_script_run_ctx

# Add src to Python path for imports when the project is not installed
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from components import controls, history, sensors
from components.layout import apply_custom_css, connection_label

from config.config import CLOCK_TICK_SEC
from config.models import DashboardConfig
from monitor.clock import read_clock
from monitor.controls import ControlPanel
from monitor.poller import SensorPoller
from utils.logging import dashboard_logger, setup_logging

POLLER_KEY = "_sensor_poller"
CONTROLS_KEY = "_control_panel"
NOTICES_KEY = "_notices"
LIVE_REFRESH_KEY = "live_refresh"


@st.cache_resource
def _get_scheduler() -> BackgroundScheduler:
    """One scheduler thread for the whole server, shared by every session."""
    scheduler = BackgroundScheduler()
    scheduler.start()
    return scheduler


def _session_liveness() -> Optional[Callable[[], bool]]:
    """Return a check that turns False once this browser session is gone."""
    ctx = get_script_run_ctx()
    if ctx is None or not runtime.exists():
        return None
    session_id = ctx.session_id

    def is_alive() -> bool:
        return runtime.exists() and runtime.get_instance().is_active_session(session_id)

    return is_alive


def _get_poller() -> SensorPoller:
    """One poller per browser session; its job stops when the session ends."""
    if POLLER_KEY not in st.session_state:
        config = DashboardConfig.from_yaml()
        setup_logging(config.log_level)
        st.session_state[POLLER_KEY] = SensorPoller(
            config,
            scheduler=_get_scheduler(),
            is_alive=_session_liveness(),
        )
        dashboard_logger.info("Created sensor poller for new session")
    return st.session_state[POLLER_KEY]


def _get_control_panel() -> ControlPanel:
    if CONTROLS_KEY not in st.session_state:
        st.session_state[CONTROLS_KEY] = ControlPanel()
    return st.session_state[CONTROLS_KEY]


def _dismiss_notice(index: int) -> None:
    notices = st.session_state.get(NOTICES_KEY, [])
    if 0 <= index < len(notices):
        notices.pop(index)


def main():
    """Main dashboard application."""

    # Page configuration
    st.set_page_config(
        page_title="Smart Home Control Center",
        page_icon="🏠",
        layout="wide",
        initial_sidebar_state="expanded"
    )
    apply_custom_css()

    poller = _get_poller()
    panel = _get_control_panel()

    # Main title
    st.title("🏠 Smart Home Control Center")
    st.caption("IoT Dashboard v2.0")

    render_connection_bar(poller)

    snapshot = poller.snapshot()
    render_notifications(snapshot.notifications)

    sensors_result = sensors.render_panel(snapshot)
    controls.render_panel(panel)
    history_result = history.render_panel(snapshot)

    render_sidebar_status(snapshot, sensors_result, history_result)

    # Clock and polled values refresh on every rerun
    if LIVE_REFRESH_KEY not in st.session_state:
        st.session_state[LIVE_REFRESH_KEY] = True
    live_refresh = st.sidebar.checkbox("🔄 Live refresh (1s)", key=LIVE_REFRESH_KEY)
    if live_refresh:
        time.sleep(CLOCK_TICK_SEC)
        st.rerun()


def render_notifications(new_notifications) -> None:
    """Keep notifications on screen until dismissed or the next connect."""
    if NOTICES_KEY not in st.session_state:
        st.session_state[NOTICES_KEY] = []
    notices = st.session_state[NOTICES_KEY]
    notices.extend(new_notifications)

    for index, notice in enumerate(notices):
        col_message, col_dismiss = st.columns([12, 1])
        with col_message:
            if notice["level"] == "error":
                st.error(notice["message"])
            elif notice["level"] == "warning":
                st.warning(notice["message"])
            else:
                st.info(notice["message"])
        with col_dismiss:
            st.button("✖", key=f"dismiss_notice_{index}", help="Dismiss",
                      on_click=_dismiss_notice, args=(index,))


def render_connection_bar(poller: SensorPoller) -> None:
    """Render the clock, URL input and connect/disconnect toggle."""
    reading = read_clock(locale=poller.config.locale)

    col_clock, col_url, col_button = st.columns([2, 4, 1])

    with col_clock:
        st.write(f"📅 {reading.date}  ⏰ {reading.time}")

    with col_url:
        url = st.text_input(
            "API URL",
            value=poller.config.default_api_url,
            placeholder="Enter your API URL...",
            label_visibility="collapsed",
            key="api_url_input",
        )
        poller.set_api_url(url)

    with col_button:
        if st.button(connection_label(poller.connected), key="connection_toggle",
                     use_container_width=True):
            if not poller.connected:
                # A new connect attempt replaces the old messages
                st.session_state[NOTICES_KEY] = []
            poller.toggle()
            dashboard_logger.info(f"Connection toggled: {poller.state.value}")
            st.rerun()


def render_sidebar_status(snapshot, sensors_result, history_result) -> None:
    """Render connection and panel status in the sidebar."""
    st.sidebar.title("📡 Connection")

    if snapshot.connected:
        st.sidebar.success("✅ Connected")
    else:
        st.sidebar.error("❌ Disconnected")

    if snapshot.api_url:
        st.sidebar.caption(f"Endpoint: `{snapshot.api_url}`")

    col1, col2 = st.sidebar.columns(2)
    with col1:
        st.metric("Polls OK", snapshot.polls_ok)
    with col2:
        st.metric("Failures", snapshot.polls_failed)

    st.sidebar.metric("History", f"{history_result.get('points', 0)}/{snapshot.capacity}")

    if sensors_result.get("fire_detected"):
        st.sidebar.error("🚨 Fire detected!")

    if snapshot.last_success_at is not None:
        st.sidebar.caption(f"Last sample: {snapshot.last_success_at.strftime('%H:%M:%S')} UTC")
    if snapshot.last_error:
        with st.sidebar.expander("ℹ️ Last error"):
            st.code(snapshot.last_error)


if __name__ == "__main__":
    main()
