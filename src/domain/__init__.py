"""Catalog domain: records, state and services."""
