"""Helpers package - pure utilities with no service dependencies."""
