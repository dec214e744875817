"""Deterministic route scoring."""

from commute.planner.scoring import plan_routes

__all__ = ["plan_routes"]
