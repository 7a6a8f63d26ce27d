"""Boundary adapters for external systems (database)."""
