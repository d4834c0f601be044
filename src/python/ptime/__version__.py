"""Version information for ptime."""

__version__ = "0.1.0"
