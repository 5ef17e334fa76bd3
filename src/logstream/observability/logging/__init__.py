"""Observability – structured logging helpers."""
from logstream.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter
from logstream.observability.logging.factory import JsonLoggerFactory
from logstream.observability.logging.processors import ErrorDetailProcessor, get_logger

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "ErrorDetailProcessor",
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "get_logger",
]
