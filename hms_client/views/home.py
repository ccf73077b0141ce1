from typing import List, Optional

from ..core.security import SessionContext
from ..models.doctor import Doctor
from ..services.booking_session import BookingSession
from ..services.doctor_directory import DoctorDirectory
from ..services.navigation import Navigator, Route
from .deps import require_authenticated


class HomeView:
    """Doctor search and booking."""

    def __init__(
        self,
        directory: DoctorDirectory,
        session: BookingSession,
        context: SessionContext,
        navigator: Navigator,
    ):
        self.directory = directory
        self.session = session
        self.context = context
        self.navigator = navigator
        self.search_term = ""

    async def mount(self) -> bool:
        require_authenticated(self.context, self.navigator, Route.HOME)
        return await self.directory.load()

    def search(self, search_term: Optional[str] = None) -> List[Doctor]:
        if search_term is not None:
            self.search_term = search_term
        return self.directory.search(self.search_term)

    @property
    def results(self) -> List[Doctor]:
        return self.directory.results

    @property
    def empty_message(self) -> Optional[str]:
        if self.directory.results:
            return None
        return "No doctors found for this disease."

    def select_doctor(self, doctor: Doctor) -> None:
        self.session.open_for_doctor(doctor)

    def close(self) -> None:
        self.session.cancel()

    async def book(self, date: str, time: str) -> bool:
        return await self.session.submit(date, time)

    def show_appointments(self) -> None:
        self.navigator.navigate(Route.APPOINTMENTS)
