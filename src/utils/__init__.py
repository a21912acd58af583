"""Shared helpers: logging setup and YAML loading."""
