"""Feature modules for posix-identity."""
