from .doctor import Doctor
from .appointment import Appointment, AppointmentCreate, AppointmentId, AppointmentUpdate

__all__ = ["Doctor", "Appointment", "AppointmentCreate", "AppointmentId", "AppointmentUpdate"]
