"""Helpers for strings, searching, collections and shared mutable state."""

__version__ = "0.0.1"

__all__ = ["collections_ops", "search", "shared", "strings"]