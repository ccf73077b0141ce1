from typing import Optional
import asyncio
import logging

import httpx

from .core.config import Settings, settings as default_settings
from .core.http import create_http_client
from .core.security import SessionContext, TokenStore, create_token_store
from .services.appointment_store import AppointmentStore
from .services.auth_service import AuthService
from .services.booking_session import BookingSession
from .services.doctor_directory import DoctorDirectory
from .services.gateway import RemoteGateway
from .services.navigation import IntentRecorder, Navigator
from .services.notifications import LoggingNotifier, Notifier
from .views.appointments import AppointmentsView
from .views.home import HomeView
from .views.login import LoginView

logger = logging.getLogger(__name__)


def configure_logging(level: Optional[str] = None) -> None:
    logging.basicConfig(level=getattr(logging, (level or default_settings.LOG_LEVEL).upper(), logging.INFO))


class HospitalClient:
    """All collaborators of one browsing session, wired together."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        token_store: Optional[TokenStore] = None,
        notifier: Optional[Notifier] = None,
        navigator: Optional[Navigator] = None,
        api_transport: Optional[httpx.AsyncBaseTransport] = None,
        auth_transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings or default_settings
        self.context = SessionContext(token_store or create_token_store())
        self.notifier = notifier or LoggingNotifier()
        self.navigator = navigator or IntentRecorder()

        self.api_client = create_http_client(
            self.settings.API_BASE_URL, self.context, api_transport,
            self.settings.REQUEST_TIMEOUT_SECONDS,
        )
        self.auth_client = create_http_client(
            self.settings.AUTH_BASE_URL, transport=auth_transport,
            timeout=self.settings.REQUEST_TIMEOUT_SECONDS,
        )

        self.gateway = RemoteGateway(self.api_client)
        self.directory = DoctorDirectory(self.gateway, self.notifier)
        self.store = AppointmentStore(self.gateway, self.notifier)
        self.session = BookingSession(self.store)
        self.auth = AuthService(self.auth_client, self.context, self.navigator, self.notifier)

        self.home = HomeView(self.directory, self.session, self.context, self.navigator)
        self.appointments = AppointmentsView(self.store, self.session, self.context, self.navigator)
        self.login = LoginView(self.auth, self.navigator)

    async def aclose(self) -> None:
        await self.api_client.aclose()
        await self.auth_client.aclose()
        logger.info(f"Shutting down {self.settings.APP_NAME}...")

    async def __aenter__(self) -> "HospitalClient":
        logger.info(f"Starting {self.settings.APP_NAME} against {self.settings.API_BASE_URL}")
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()


async def list_roster() -> int:
    """Print the doctor roster; exit status 1 when it cannot be fetched."""
    async with HospitalClient() as client:
        if not await client.directory.load():
            return 1
        for doctor in client.directory.doctors:
            print(f"{doctor.id}\t{doctor.name}\t{doctor.specialty}\t{', '.join(doctor.diseases)}")
    return 0


if __name__ == "__main__":
    configure_logging()
    raise SystemExit(asyncio.run(list_roster()))
