"""Domain enums."""

from enum import Enum


class CommuteMode(str, Enum):
    CAR = "CAR"
    CARPOOL = "CARPOOL"
    TRANSIT = "TRANSIT"
    BIKE = "BIKE"
    WALK = "WALK"


class LookupFailure(str, Enum):
    NOT_CONFIGURED = "not_configured"
    HTTP_ERROR = "http_error"
    PROVIDER_STATUS = "provider_status"
    NO_ROUTE = "no_route"
    MISSING_FIELDS = "missing_fields"
    TIMEOUT = "timeout"
    ERROR = "error"
