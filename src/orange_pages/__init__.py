"""Orange Pages member permission service."""

__version__ = "0.1.0"
