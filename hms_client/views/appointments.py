from typing import List, Optional

from ..core.security import SessionContext
from ..models.appointment import Appointment, AppointmentId
from ..services.appointment_store import AppointmentStore, Confirm
from ..services.booking_session import BookingSession
from ..services.navigation import Navigator, Route
from .deps import require_authenticated


class AppointmentsView:
    """Booked appointments with edit and delete actions."""

    def __init__(
        self,
        store: AppointmentStore,
        session: BookingSession,
        context: SessionContext,
        navigator: Navigator,
    ):
        self.store = store
        self.session = session
        self.context = context
        self.navigator = navigator

    async def mount(self) -> bool:
        require_authenticated(self.context, self.navigator, Route.APPOINTMENTS)
        return await self.store.load()

    @property
    def appointments(self) -> List[Appointment]:
        return self.store.appointments

    @property
    def empty_message(self) -> Optional[str]:
        return None if self.store.appointments else "No appointments booked yet."

    def edit(self, appointment: Appointment) -> None:
        self.session.open_for_appointment(appointment)

    def close(self) -> None:
        self.session.cancel()

    async def save(self, date: str, time: str) -> bool:
        return await self.session.submit(date, time)

    async def delete(self, appointment_id: AppointmentId, confirm: Confirm) -> bool:
        return await self.store.delete(appointment_id, confirm)
