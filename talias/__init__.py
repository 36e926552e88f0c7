"""talias: a terminal launcher for a tree of named shell commands."""

__version__ = "0.3.0"
