"""Contracts API: create and look up contract records."""

__version__ = "1.0.0"
