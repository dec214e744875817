"""Shared cross-layer types and exceptions."""

from commute.shared.exceptions import KeyMissingError, ToolError, ToolTimeoutError

__all__ = ["ToolError", "ToolTimeoutError", "KeyMissingError"]
