"""Pydantic domain models."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from commute.domain.enums import CommuteMode, LookupFailure


class RawModeResult(BaseModel):
    """Distance and duration reported by the directions provider for one mode."""

    model_config = ConfigDict(frozen=True)

    distance_km: float
    eta_minutes: int


class RouteLookup(BaseModel):
    """Outcome of one gateway call: a route, or the reason there is none."""

    model_config = ConfigDict(frozen=True)

    mode: CommuteMode
    route: Optional[RawModeResult] = None
    reason: Optional[LookupFailure] = None

    @property
    def available(self) -> bool:
        return self.route is not None

    @classmethod
    def found(cls, mode: CommuteMode, route: RawModeResult) -> RouteLookup:
        return cls(mode=mode, route=route)

    @classmethod
    def unavailable(cls, mode: CommuteMode, reason: LookupFailure) -> RouteLookup:
        return cls(mode=mode, reason=reason)


class RouteOption(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    mode: CommuteMode
    eta_minutes: int = Field(alias="etaMinutes")
    relative_time_label: str = Field(alias="relativeTimeLabel")
    co2_kg: float = Field(alias="co2Kg")
    co2_savings_percent: int = Field(alias="co2SavingsPercent")
    cost_estimate: float = Field(alias="costEstimate")
    distance_km: float = Field(default=0.0, exclude=True)
