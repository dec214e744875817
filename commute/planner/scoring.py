"""Route scoring: turns per-mode lookups into a ranked, annotated option list.

Pure and deterministic; the same lookups always yield the same options.
"""

from __future__ import annotations

from collections.abc import Mapping

from commute.domain.constants import (
    BASELINE_MODE,
    COST_RATES,
    EMISSION_FACTORS,
    FASTER_LABEL,
    FASTEST_LABEL,
    SLOWER_LABEL,
)
from commute.domain.enums import CommuteMode
from commute.domain.models import RawModeResult, RouteLookup, RouteOption
from commute.shared.numbers import round_half_up, round_to_int


def estimate_cost(mode: CommuteMode, distance_km: float) -> float:
    fixed, per_km = COST_RATES[mode]
    return fixed + distance_km * per_km


def estimate_co2(mode: CommuteMode, distance_km: float) -> float:
    return distance_km * EMISSION_FACTORS[mode]


def co2_savings_percent(co2_kg: float, baseline_co2: float) -> int:
    """Reduction versus the baseline, floored at 0; 0 when there is no baseline."""
    if baseline_co2 <= 0:
        return 0
    return max(0, round_to_int((1 - co2_kg / baseline_co2) * 100))


def relative_time_label(eta_minutes: int, fastest_eta: int) -> str:
    diff = eta_minutes - fastest_eta
    if diff == 0:
        return FASTEST_LABEL
    if diff > 0:
        return SLOWER_LABEL.format(minutes=diff)
    return FASTER_LABEL.format(minutes=abs(diff))


def available_routes(lookups: Mapping[CommuteMode, RouteLookup]) -> list[tuple[CommuteMode, RawModeResult]]:
    """Available routes in enumeration order; absent modes count as unavailable."""
    routes: list[tuple[CommuteMode, RawModeResult]] = []
    for mode in CommuteMode:
        lookup = lookups.get(mode)
        if lookup is None or lookup.route is None:
            continue
        route = lookup.route
        routes.append((mode, RawModeResult(
            distance_km=max(0.0, route.distance_km),
            eta_minutes=max(0, route.eta_minutes),
        )))
    return routes


def plan_routes(lookups: Mapping[CommuteMode, RouteLookup]) -> list[RouteOption]:
    routes = available_routes(lookups)
    if not routes:
        return []

    fastest_eta = min(route.eta_minutes for _, route in routes)
    baseline_co2 = 0.0
    for mode, route in routes:
        if mode == BASELINE_MODE:
            baseline_co2 = estimate_co2(mode, route.distance_km)

    options: list[RouteOption] = []
    # ids index the enumeration-ordered list, before the ETA sort
    for index, (mode, route) in enumerate(routes):
        co2 = estimate_co2(mode, route.distance_km)
        options.append(RouteOption(
            id=f"{mode.value.lower()}-{index}",
            mode=mode,
            eta_minutes=route.eta_minutes,
            relative_time_label=relative_time_label(route.eta_minutes, fastest_eta),
            co2_kg=round_half_up(co2, 2),
            co2_savings_percent=co2_savings_percent(co2, baseline_co2),
            cost_estimate=round_half_up(estimate_cost(mode, route.distance_km), 2),
            distance_km=route.distance_km,
        ))

    return sorted(options, key=lambda option: option.eta_minutes)
