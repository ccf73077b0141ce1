from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, Optional, Union

from .doctor import Doctor

AppointmentId = Union[int, str]


class Appointment(BaseModel):
    """A booked appointment.

    doctor_name, specialization and disease are copied in at booking time and
    are not kept in step with the doctor record afterwards.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, coerce_numbers_to_str=True)

    id: AppointmentId
    doctor_id: str = Field(alias="doctorId")

    # Booking-time snapshot
    doctor_name: str = Field(alias="doctorName")
    specialization: str
    disease: Optional[str] = None

    date: str
    time: str

    def snapshot_doctor(self) -> Doctor:
        """Rebuild the doctor as it was recorded on this appointment."""
        return Doctor(
            id=self.doctor_id,
            name=self.doctor_name,
            specialty=self.specialization,
            diseases=[self.disease] if self.disease else [],
        )

    def __repr__(self):
        return f"<Appointment(id={self.id!r}, doctor_id='{self.doctor_id}', date='{self.date}', time='{self.time}')>"


class AppointmentCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    doctor_id: str = Field(alias="doctorId")
    doctor_name: str = Field(alias="doctorName")
    specialization: str
    date: str
    time: str

    @classmethod
    def for_doctor(cls, doctor: Doctor, date: str, time: str) -> "AppointmentCreate":
        return cls(
            doctor_id=doctor.id,
            doctor_name=doctor.name,
            specialization=doctor.specialty,
            date=date,
            time=time,
        )

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


class AppointmentUpdate(AppointmentCreate):
    disease: Optional[str] = None

    @classmethod
    def for_appointment(
        cls, original: Appointment, doctor: Doctor, date: str, time: str
    ) -> "AppointmentUpdate":
        # doctor id and disease always come from the stored record
        return cls(
            doctor_id=original.doctor_id,
            doctor_name=doctor.name,
            specialization=doctor.specialty,
            disease=original.disease,
            date=date,
            time=time,
        )

    def to_wire(self) -> Dict[str, Any]:
        # a record without a disease keeps having none
        return self.model_dump(by_alias=True, exclude_none=True)
