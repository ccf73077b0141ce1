from ..core.errors import ValidationFailure
from ..services.auth_service import AuthService
from ..services.navigation import Navigator, Route


class LoginView:
    def __init__(self, auth_service: AuthService, navigator: Navigator):
        self.auth_service = auth_service
        self.navigator = navigator
        self.submitting = False
        self.error = None

    async def submit(self, email: str, password: str) -> bool:
        self.submitting = True
        self.error = None
        try:
            return await self.auth_service.login(email, password)
        except ValidationFailure as e:
            self.error = e.detail
            return False
        finally:
            self.submitting = False

    def register(self) -> None:
        self.navigator.navigate(Route.REGISTER)
