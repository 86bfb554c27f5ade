"""Dining philosophers simulation: argument parsing, table state, status output and the threaded dinner."""

__version__ = "0.1.0"