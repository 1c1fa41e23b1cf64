"""Interfaces package - HTTP boundary over the services."""
