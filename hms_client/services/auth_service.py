from pydantic import ValidationError
import httpx
import logging

from ..core.errors import ValidationFailure
from ..core.security import SessionContext
from ..schemas.auth import LoginResponse, UserLogin
from .navigation import Navigator, Route
from .notifications import Notifier

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(
        self,
        client: httpx.AsyncClient,
        context: SessionContext,
        navigator: Navigator,
        notifier: Notifier,
    ):
        self.client = client
        self.context = context
        self.navigator = navigator
        self.notifier = notifier

    async def login(self, email: str, password: str) -> bool:
        """Authenticate and, on success, continue to the home view."""
        try:
            credentials = UserLogin(email=email, password=password)
        except ValidationError as e:
            failure = ValidationFailure(e.errors()[0]["msg"].removeprefix("Value error, "))
            self.notifier.error(failure.detail)
            raise failure from e

        try:
            response = await self.client.post("/user/", json=credentials.model_dump())
            response.raise_for_status()
            data = LoginResponse.model_validate(response.json())
        except httpx.HTTPStatusError as e:
            logger.error(f"Login rejected: {e.response.status_code}")
            self.notifier.error("Invalid email or password")
            return False
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Login failed: {str(e)}")
            self.notifier.error(str(e) or "An unexpected error occurred")
            return False

        token = data.session_token
        if token:
            self.context.sign_in(token)
        else:
            logger.warning("Login response carried no token")

        self.notifier.success("User login successful!")
        self.navigator.navigate(Route.HOME)
        return True

    def logout(self) -> None:
        """Forget the stored token and return to the login view."""
        self.context.sign_out()
        self.navigator.navigate(Route.LOGIN)
