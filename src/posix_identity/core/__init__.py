"""Core building blocks shared across posix-identity features."""
