from typing import Generator, Optional
import httpx

from .config import settings
from .security import SessionContext


class BearerTokenAuth(httpx.Auth):
    """Attach the session token, when there is one, to each request."""

    def __init__(self, context: SessionContext):
        self.context = context

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        token = self.context.token
        if token:
            request.headers["Authorization"] = f"Bearer {token}"
        yield request


def create_http_client(
    base_url: str,
    context: Optional[SessionContext] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    timeout: Optional[float] = None,
) -> httpx.AsyncClient:
    """Build the async HTTP client used by the gateway and the auth service."""
    return httpx.AsyncClient(
        base_url=base_url,
        auth=BearerTokenAuth(context) if context else None,
        timeout=timeout if timeout is not None else settings.REQUEST_TIMEOUT_SECONDS,
        transport=transport,
        headers={"Accept": "application/json"},
    )
