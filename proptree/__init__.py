"""Hierarchical property trees with path access, typed values, JSON output and an INFO syntax check."""

__version__ = "0.1.0"