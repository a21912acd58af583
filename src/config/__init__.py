"""Configuration constants, schemas and the YAML-backed dashboard config."""
