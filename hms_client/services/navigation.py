from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Protocol
import logging

logger = logging.getLogger(__name__)


class Route(str, Enum):
    LOGIN = "/login"
    REGISTER = "/register"
    HOME = "/Home"
    APPOINTMENTS = "/appointments"


@dataclass(frozen=True)
class NavigationIntent:
    route: Route
    state: Dict[str, Any] = field(default_factory=dict)


class Navigator(Protocol):
    def navigate(self, route: Route, state: Optional[Dict[str, Any]] = None) -> None: ...


class IntentRecorder:
    """Navigator that records intents for an external router to act on."""

    def __init__(self):
        self.history: List[NavigationIntent] = []

    def navigate(self, route: Route, state: Optional[Dict[str, Any]] = None) -> None:
        logger.info(f"Navigate to {route.value}")
        self.history.append(NavigationIntent(route, dict(state or {})))

    @property
    def current(self) -> Optional[NavigationIntent]:
        return self.history[-1] if self.history else None
