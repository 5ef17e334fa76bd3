"""Adapters – bindings to transport libraries."""
