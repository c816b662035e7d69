"""Bundled data files: spawn tables (YAML) and their JSON Schemas."""
