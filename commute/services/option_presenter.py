"""Presentation helpers for route options."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional

from commute.domain.enums import CommuteMode
from commute.domain.models import RouteOption

MODE_LABELS: dict[CommuteMode, str] = {
    CommuteMode.CAR: "Car",
    CommuteMode.CARPOOL: "Carpool",
    CommuteMode.TRANSIT: "Transit",
    CommuteMode.BIKE: "Bike",
    CommuteMode.WALK: "Walk",
}


def format_duration(total_minutes: int) -> str:
    if total_minutes < 0:
        return "-"
    hours, minutes = divmod(int(total_minutes), 60)
    if hours == 0:
        return f"{minutes} min"
    hour_text = f"{hours} hr{'s' if hours > 1 else ''}"
    if minutes == 0:
        return hour_text
    return f"{hour_text} {minutes} min"


def parse_departure(date: str, time: str) -> Optional[datetime]:
    """Combine ``YYYY-MM-DD`` and ``HH:MM``; None when either does not parse."""
    try:
        return datetime.fromisoformat(f"{date.strip()}T{time.strip()}")
    except ValueError:
        return None


def arrival_time_label(departure: Optional[datetime], eta_minutes: int) -> Optional[str]:
    if departure is None:
        return None
    arrival = departure + timedelta(minutes=eta_minutes)
    hour = arrival.hour % 12 or 12
    suffix = "AM" if arrival.hour < 12 else "PM"
    return f"Arrives at {hour}:{arrival.minute:02d} {suffix}"


def format_cost(cost: float) -> str:
    return f"${cost:.2f}"


def format_savings(percent: int) -> str:
    return f"{percent}% less CO₂" if percent > 0 else "-"


def render_options_text(
    options: list[RouteOption],
    *,
    origin: str = "",
    destination: str = "",
    departure: Optional[datetime] = None,
) -> str:
    lines: list[str] = []
    if origin and destination:
        lines.append(f"{origin} → {destination}")
        lines.append("=" * 50)

    if not options:
        lines.append("No route options found for this trip.")
        return "\n".join(lines)

    for option in options:
        header = f"{MODE_LABELS[option.mode]:<8} {format_duration(option.eta_minutes):<14} {option.relative_time_label}"
        lines.append(header)
        arrival = arrival_time_label(departure, option.eta_minutes)
        if arrival:
            lines.append(f"         {arrival}")
        lines.append(
            f"         CO₂ {option.co2_kg:.2f} kg | {format_savings(option.co2_savings_percent)}"
            f" | cost {format_cost(option.cost_estimate)}"
        )
    return "\n".join(lines)
