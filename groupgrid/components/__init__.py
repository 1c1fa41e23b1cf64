"""Components package - stateful building blocks composed by services."""
