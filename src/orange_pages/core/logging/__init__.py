"""Logging module with structured logging and request tracking."""

from orange_pages.core.logging.middleware import RequestLoggingMiddleware


__all__ = [
    "RequestLoggingMiddleware",
]
