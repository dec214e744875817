"""FastAPI application for commute route planning."""

from __future__ import annotations

import logging
import os
from typing import Any, Optional

from dotenv import load_dotenv
from fastapi import Body, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from commute import __version__
from commute.api.schemas import ErrorResponse, HealthResponse, RoutePlanResponse
from commute.application.context import CommuteContext, make_commute_context
from commute.application.contracts import parse_route_request
from commute.application.plan_commute import plan_commute
from commute.domain.exceptions import InvalidRouteRequest
from commute.security.key_manager import get_key_manager
from commute.shared.exceptions import KeyMissingError

_api_logger = logging.getLogger("commute.api")

load_dotenv()

MISSING_FIELDS_MESSAGE = "Missing required fields: origin, destination, date, time"
NOT_CONFIGURED_MESSAGE = "Server directions API key is not configured"
UNEXPECTED_MESSAGE = "Unexpected error while planning route"

app = FastAPI(
    title="commute-compare",
    version=__version__,
    docs_url="/docs" if os.getenv("ENABLE_DOCS", "false").lower() == "true" else None,
    redoc_url=None,
)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        response.headers["Cache-Control"] = "no-store"
        return response


app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=os.getenv("CORS_ORIGINS", "*").split(","),
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

_context: Optional[CommuteContext] = None


def get_context() -> CommuteContext:
    """Build the default context on first use; a failed build is retried next call."""
    global _context
    if _context is None:
        _context = make_commute_context()
    return _context


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


def _safe_log_exception(context: str, exc: Exception) -> None:
    safe_msg = get_key_manager().scrub_text(str(exc))
    _api_logger.error("%s: %s: %s", context, type(exc).__name__, safe_msg)


@app.exception_handler(RequestValidationError)
async def _invalid_body(_request: Request, _exc: RequestValidationError) -> JSONResponse:
    return _error(400, MISSING_FIELDS_MESSAGE)


@app.get("/health", response_model=HealthResponse)
def health():
    return HealthResponse(status="ok")


@app.post(
    "/api/routes/plan",
    response_model=RoutePlanResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def plan_routes_endpoint(payload: Any = Body(default=None)):
    try:
        request = parse_route_request(payload)
    except InvalidRouteRequest as exc:
        _api_logger.info("rejected route request: %s", exc)
        return _error(400, MISSING_FIELDS_MESSAGE)

    try:
        plan = plan_commute(request, get_context())
    except KeyMissingError as exc:
        _safe_log_exception("directions provider not configured", exc)
        return _error(500, NOT_CONFIGURED_MESSAGE)
    except Exception as exc:
        _safe_log_exception("Error in /api/routes/plan", exc)
        return _error(500, UNEXPECTED_MESSAGE)

    return RoutePlanResponse(options=plan.options)
