"""Single entrypoint for commute planning orchestration."""

from __future__ import annotations

import concurrent.futures
from typing import Optional

from commute.application.context import CommuteContext
from commute.application.contracts import CommutePlan, RoutePlanRequest
from commute.domain.enums import CommuteMode, LookupFailure
from commute.domain.models import RouteLookup
from commute.infrastructure.logging import StructuredLogger, get_logger
from commute.planner.scoring import plan_routes
from commute.shared.exceptions import KeyMissingError
from commute.tools.interfaces import DirectionsGateway


def _resolve_lookup(
    mode: CommuteMode,
    future: concurrent.futures.Future,
    logger: StructuredLogger,
) -> RouteLookup:
    if not future.done():
        future.cancel()
        logger.warning("fetch_routes", f"lookup for {mode.value} did not finish in time", mode=mode.value)
        return RouteLookup.unavailable(mode, LookupFailure.TIMEOUT)

    try:
        lookup = future.result()
    except Exception as exc:
        logger.error("fetch_routes", f"{type(exc).__name__}: {exc}", mode=mode.value)
        return RouteLookup.unavailable(mode, LookupFailure.ERROR)

    logger.lookup(
        mode.value,
        available=lookup.available,
        reason=lookup.reason.value if lookup.reason else None,
    )
    return lookup


def fetch_all_modes(
    gateway: DirectionsGateway,
    origin: str,
    destination: str,
    *,
    timeout: float,
    logger: Optional[StructuredLogger] = None,
) -> dict[CommuteMode, RouteLookup]:
    """Fan out one lookup per mode and wait for all of them (or the deadline)."""
    active_logger = logger or get_logger()
    pool = concurrent.futures.ThreadPoolExecutor(
        max_workers=len(CommuteMode),
        thread_name_prefix="directions",
    )
    try:
        futures = {
            mode: pool.submit(gateway.fetch_route, origin, destination, mode)
            for mode in CommuteMode
        }
        concurrent.futures.wait(futures.values(), timeout=timeout)
        return {
            mode: _resolve_lookup(mode, future, active_logger)
            for mode, future in futures.items()
        }
    finally:
        # stragglers past the deadline are abandoned, not awaited
        pool.shutdown(wait=False, cancel_futures=True)


def plan_commute(request: RoutePlanRequest, ctx: CommuteContext) -> CommutePlan:
    logger = ctx.logger.with_trace()

    if not ctx.gateway.is_configured():
        logger.error("configure", f"{ctx.settings.api_key_env} is not set")
        raise KeyMissingError(ctx.settings.api_key_env)

    logger.stage_start("fetch_routes", date=request.date, time=request.time)
    lookups = fetch_all_modes(
        ctx.gateway,
        request.origin,
        request.destination,
        timeout=ctx.settings.fanout_timeout_seconds,
        logger=logger,
    )
    available = [mode.value for mode, lookup in lookups.items() if lookup.available]
    logger.stage_end("fetch_routes", available=available)

    logger.stage_start("score")
    options = plan_routes(lookups)
    logger.stage_end("score", options=len(options))

    logger.summary(
        options=len(options),
        fastest=options[0].mode.value if options else None,
    )
    return CommutePlan(options=options, lookups=lookups, trace_id=logger.trace_id)


__all__ = ["fetch_all_modes", "plan_commute"]
