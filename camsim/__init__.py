"""Simulated cameras sending binary status and discover messages to a TCP collector server."""

__version__ = "0.1.0"
__all__ = ["__version__"]