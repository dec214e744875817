"""Tool abstraction protocols."""

from commute.tools.interfaces import DirectionsGateway

__all__ = ["DirectionsGateway"]
