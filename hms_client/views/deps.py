from ..core.errors import AuthenticationRequired
from ..core.security import SessionContext
from ..services.navigation import Navigator, Route


def require_authenticated(context: SessionContext, navigator: Navigator, location: Route) -> None:
    """Send the user to login, remembering where they came from, unless signed in."""
    if context.is_authenticated():
        return
    navigator.navigate(Route.LOGIN, {"from": location.value})
    raise AuthenticationRequired(location.value)
