"""Dashboard package namespace.

This package contains the Streamlit page for the sensor dashboard. Each
component exposes a small `render_panel` function that draws from a
`PollerSnapshot` and returns simple values for the sidebar status; chart
builders return matplotlib figures so they can be tested without Streamlit.
"""
