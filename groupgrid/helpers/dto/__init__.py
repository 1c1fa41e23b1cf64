"""Data transfer objects shared between components, services and interfaces."""
