"""HTTP adapter – log streams over httpx."""
from logstream.adapters.http.client import LogClient
from logstream.adapters.http.source import HttpxResponseSource

__all__ = ["HttpxResponseSource", "LogClient"]
