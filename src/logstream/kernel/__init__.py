"""Kernel – errors, I/O ports, wire time codecs and value objects."""
