"""Integration API (/api/v1)."""
