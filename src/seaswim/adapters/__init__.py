"""Adapters - file-backed catalogs, exclusion list and configuration."""
