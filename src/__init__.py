"""Catalog admin core."""
