"""commute-compare CLI entry point."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Optional, Sequence

from dotenv import load_dotenv

from commute.adapters.directions.fixture import FixtureDirectionsGateway
from commute.api.schemas import RoutePlanResponse
from commute.application.context import CommuteContext, make_commute_context
from commute.application.contracts import parse_route_request
from commute.application.plan_commute import plan_commute
from commute.config.settings import resolve_directions_settings
from commute.domain.exceptions import InvalidRouteRequest
from commute.infrastructure.logging import get_logger
from commute.security.key_manager import get_key_manager
from commute.services.option_presenter import parse_departure, render_options_text
from commute.shared.exceptions import KeyMissingError

EXIT_UNEXPECTED = 1
EXIT_INVALID_REQUEST = 2
EXIT_NOT_CONFIGURED = 3


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="commute-compare",
        description="Compare car, carpool, transit, bike and walk options for one trip.",
    )
    parser.add_argument("--origin", default="", help="Origin address or place name")
    parser.add_argument("--destination", default="", help="Destination address or place name")
    parser.add_argument("--date", default="", help="Departure date, YYYY-MM-DD")
    parser.add_argument("--time", default="", help="Departure time, HH:MM")
    parser.add_argument("--json", action="store_true", help="Print the JSON response envelope")
    parser.add_argument("--fixture", default="", help="Serve routes from a fixture file instead of the provider")
    return parser


def _make_context(fixture: str) -> CommuteContext:
    if not fixture:
        return make_commute_context()
    return CommuteContext(
        settings=resolve_directions_settings(),
        gateway=FixtureDirectionsGateway.from_file(fixture),
        logger=get_logger(),
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    load_dotenv()
    args = _build_parser().parse_args(argv)

    try:
        request = parse_route_request({
            "origin": args.origin,
            "destination": args.destination,
            "date": args.date,
            "time": args.time,
        })
    except InvalidRouteRequest as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_INVALID_REQUEST

    try:
        plan = plan_commute(request, _make_context(args.fixture))
    except KeyMissingError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_NOT_CONFIGURED
    except Exception as exc:
        safe_msg = get_key_manager().scrub_text(f"{type(exc).__name__}: {exc}")
        print(f"Error: Unexpected error while planning route ({safe_msg})", file=sys.stderr)
        return EXIT_UNEXPECTED

    if args.json:
        payload = RoutePlanResponse(options=plan.options).model_dump(mode="json", by_alias=True)
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        print(render_options_text(
            plan.options,
            origin=request.origin,
            destination=request.destination,
            departure=parse_departure(request.date, request.time),
        ))
    return 0


if __name__ == "__main__":
    sys.exit(main())
