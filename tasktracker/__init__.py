"""In-memory task tracking HTTP service."""

__version__ = "0.1.0"
