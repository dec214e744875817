"""Static emission and cost tables."""

from __future__ import annotations

from commute.domain.enums import CommuteMode

# kg CO2 per passenger km
EMISSION_FACTORS: dict[CommuteMode, float] = {
    CommuteMode.CAR: 0.192,  # average petrol car
    CommuteMode.CARPOOL: 0.096,  # half impact per passenger
    CommuteMode.TRANSIT: 0.075,  # bus/rail per passenger km
    CommuteMode.BIKE: 0.0,
    CommuteMode.WALK: 0.0,
}

BASELINE_MODE = CommuteMode.CAR

# (fixed fare, per-km rate)
COST_RATES: dict[CommuteMode, tuple[float, float]] = {
    CommuteMode.CAR: (0.0, 0.30),  # fuel approximation
    CommuteMode.CARPOOL: (0.0, 0.15),
    CommuteMode.TRANSIT: (2.0, 0.10),  # base fare + per km
    CommuteMode.BIKE: (0.0, 0.0),
    CommuteMode.WALK: (0.0, 0.0),
}

FASTEST_LABEL = "Fastest option"
SLOWER_LABEL = "{minutes} min slower than fastest"
FASTER_LABEL = "{minutes} min faster than fastest"
