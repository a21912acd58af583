"""Streamlit panels for the sensor dashboard."""
