from typing import Awaitable, Callable, List, Optional, Union
import inspect
import logging

from ..core.errors import GatewayError, NotFoundFailure
from ..models.appointment import Appointment, AppointmentCreate, AppointmentId, AppointmentUpdate
from ..models.doctor import Doctor
from .gateway import RemoteGateway
from .notifications import Notifier

logger = logging.getLogger(__name__)

DELETE_CONFIRMATION = "Are you sure you want to delete this appointment?"

Confirm = Callable[[str], Union[bool, Awaitable[bool]]]


class AppointmentStore:
    def __init__(self, gateway: RemoteGateway, notifier: Notifier):
        self.gateway = gateway
        self.notifier = notifier
        self._appointments: List[Appointment] = []

    @property
    def appointments(self) -> List[Appointment]:
        return list(self._appointments)

    def get(self, appointment_id: AppointmentId) -> Optional[Appointment]:
        for appointment in self._appointments:
            if str(appointment.id) == str(appointment_id):
                return appointment
        return None

    async def load(self) -> bool:
        """Replace the local list with the service's; keep it on failure."""
        try:
            appointments = await self.gateway.list_appointments()
        except GatewayError as e:
            logger.error(f"Error fetching appointments: {e.detail}")
            self.notifier.error("Could not load appointments. Please try again.")
            return False

        self._appointments = appointments
        return True

    async def create(self, doctor: Doctor, date: str, time: str) -> Optional[Appointment]:
        """Book an appointment.

        The new record is not added locally; call ``load()`` to see it.
        """
        payload = AppointmentCreate.for_doctor(doctor, date, time)
        try:
            appointment = await self.gateway.create_appointment(payload)
        except GatewayError as e:
            logger.error(f"Error booking appointment: {e.detail}")
            self.notifier.error("Could not book the appointment. Please try again.")
            return None

        logger.info(f"Booked appointment {appointment.id} with doctor {doctor.id}")
        self.notifier.success("Appointment booked successfully!")
        return appointment

    async def update(
        self, appointment_id: AppointmentId, doctor: Doctor, date: str, time: str
    ) -> Optional[Appointment]:
        original = self.get(appointment_id)
        if original is None:
            logger.error(f"Error updating appointment: {appointment_id} is not loaded")
            self.notifier.error(NotFoundFailure().detail)
            return None

        payload = AppointmentUpdate.for_appointment(original, doctor, date, time)
        try:
            await self.gateway.update_appointment(original.id, payload)
        except GatewayError as e:
            logger.error(f"Error updating appointment: {e.detail}")
            self.notifier.error("Could not update the appointment. Please try again.")
            return None

        updated = original.model_copy(
            update={"doctor_name": doctor.name, "date": date, "time": time}
        )
        self._appointments = [
            updated if appt.id == original.id else appt for appt in self._appointments
        ]
        self.notifier.success("Appointment updated successfully!")
        return updated

    async def delete(self, appointment_id: AppointmentId, confirm: Confirm) -> bool:
        """Delete after the user confirms; a refusal makes no request."""
        answer = confirm(DELETE_CONFIRMATION)
        if inspect.isawaitable(answer):
            answer = await answer
        if not answer:
            logger.info(f"Deletion of appointment {appointment_id} cancelled")
            return False

        try:
            await self.gateway.delete_appointment(appointment_id)
        except GatewayError as e:
            logger.error(f"Error deleting appointment: {e.detail}")
            self.notifier.error("Could not delete the appointment. Please try again.")
            return False

        self._appointments = [
            appt for appt in self._appointments if str(appt.id) != str(appointment_id)
        ]
        self.notifier.success("Appointment deleted successfully")
        return True
