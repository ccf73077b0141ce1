from typing import Optional


class GatewayError(Exception):
    """Base class for failures talking to the booking service."""

    def __init__(self, detail: str = "Request to the booking service failed",
                 status_code: Optional[int] = None):
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code


class NetworkFailure(GatewayError):
    """Service unreachable, timed out, or answered with a non-2xx status."""


class NotFoundFailure(GatewayError):
    """The record targeted by a mutation no longer exists."""

    def __init__(self, detail: str = "The requested resource was not found"):
        super().__init__(detail, status_code=404)


class ValidationFailure(Exception):
    def __init__(self, detail: str = "Invalid input"):
        super().__init__(detail)
        self.detail = detail


class AuthenticationRequired(Exception):
    def __init__(self, location: str, detail: str = "Login required"):
        super().__init__(detail)
        self.location = location
        self.detail = detail
