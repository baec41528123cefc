"""Version information for posix-identity."""

__version__ = "1.0.0"
