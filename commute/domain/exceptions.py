"""Domain semantic exceptions."""


class DomainError(Exception):
    """Base domain exception."""


class InvalidRouteRequest(DomainError):
    """Raised when a route plan request is missing a required field."""

    def __init__(self, fields: list[str]):
        self.fields = fields
        super().__init__(f"Missing or empty required fields: {', '.join(fields)}")
