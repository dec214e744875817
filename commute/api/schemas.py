"""API request/response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from commute.domain.models import RouteOption


class RoutePlanResponse(BaseModel):
    options: list[RouteOption] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str = "ok"
