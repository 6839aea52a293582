"""Core path grouping engine."""
