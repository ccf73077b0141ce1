"""
Booking/edit session.

At most one session exists at a time. It is either ``Closed`` or ``Open`` on a
doctor, in ``Create`` mode (booking from search results) or ``Edit`` mode
(changing an existing appointment). Opening a session while another is open
replaces it.
"""

from dataclasses import dataclass
from typing import Optional, Union
import logging

from ..models.appointment import Appointment
from ..models.doctor import Doctor
from .appointment_store import AppointmentStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Closed:
    pass


@dataclass(frozen=True)
class Create:
    pass


@dataclass(frozen=True)
class Edit:
    appointment: Appointment


@dataclass(frozen=True)
class Open:
    doctor: Doctor
    mode: Union[Create, Edit]


SessionState = Union[Closed, Open]

CLOSED = Closed()


class BookingSession:
    def __init__(self, store: AppointmentStore):
        self.store = store
        self.state: SessionState = CLOSED

    @property
    def is_open(self) -> bool:
        return isinstance(self.state, Open)

    @property
    def doctor(self) -> Optional[Doctor]:
        return self.state.doctor if isinstance(self.state, Open) else None

    def open_for_doctor(self, doctor: Doctor) -> Open:
        return self._open(Open(doctor.model_copy(deep=True), Create()))

    def open_for_appointment(self, appointment: Appointment) -> Open:
        return self._open(Open(appointment.snapshot_doctor(), Edit(appointment)))

    def cancel(self) -> None:
        self.state = CLOSED

    async def submit(self, date: str, time: str) -> bool:
        """Commit the session. Closes on success, stays open on failure."""
        state = self.state
        if not isinstance(state, Open):
            logger.warning("Submit ignored: no booking session is open")
            return False

        if isinstance(state.mode, Edit):
            result = await self.store.update(state.mode.appointment.id, state.doctor, date, time)
        else:
            result = await self.store.create(state.doctor, date, time)

        if result is None:
            return False
        # a newer session may have replaced this one while the request was in flight
        if self.state is state:
            self.state = CLOSED
        return True

    def _open(self, state: Open) -> Open:
        if isinstance(self.state, Open):
            logger.info(f"Replacing open session for doctor {self.state.doctor.id}")
        self.state = state
        return state
