"""commute-compare: multi-mode commute comparison service."""

__version__ = "1.0.0"
