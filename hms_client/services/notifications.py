from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import List, Protocol
import logging

logger = logging.getLogger(__name__)


class NotificationLevel(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class Notification:
    level: NotificationLevel
    message: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class Notifier(Protocol):
    """User-visible feedback channel (toasts, alerts, console lines)."""

    def success(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...


class LoggingNotifier:
    def success(self, message: str) -> None:
        logger.info(message)

    def error(self, message: str) -> None:
        logger.error(message)


class CollectingNotifier:
    """Keeps every notification so a shell or a test can render them later."""

    def __init__(self):
        self.notifications: List[Notification] = []

    def success(self, message: str) -> None:
        self.notifications.append(Notification(NotificationLevel.SUCCESS, message))

    def error(self, message: str) -> None:
        self.notifications.append(Notification(NotificationLevel.ERROR, message))

    @property
    def messages(self) -> List[str]:
        return [n.message for n in self.notifications]

    @property
    def errors(self) -> List[str]:
        return [n.message for n in self.notifications if n.level == NotificationLevel.ERROR]

    def clear(self) -> None:
        self.notifications.clear()
