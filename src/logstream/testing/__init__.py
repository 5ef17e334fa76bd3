"""Testing helpers for code that consumes event streams."""
