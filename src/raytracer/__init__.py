"""Recursive Whitted-style ray tracer."""

__version__ = "1.0.0"
