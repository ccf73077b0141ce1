import pytest

from hms_client.models.appointment import Appointment
from hms_client.models.doctor import Doctor
from hms_client.services.booking_session import Closed, Create, Edit, Open

pytestmark = pytest.mark.anyio

dr_a = Doctor(id="d1", name="Dr. A", specialty="Cardio", diseases=["flu", "cold"])
dr_b = Doctor(id="d2", name="Dr. B", specialty="Oncology", diseases=["Lung Cancer"])


class TestBookingSession:

    def test_starts_closed(self, client):
        assert isinstance(client.session.state, Closed)
        assert client.session.doctor is None

    def test_open_for_doctor(self, client):
        """Test selecting a search result opens a create session on a copy."""
        state = client.session.open_for_doctor(dr_a)

        assert state.mode == Create()
        assert state.doctor == dr_a
        assert state.doctor is not dr_a

    def test_open_for_appointment_uses_snapshot(self, client):
        """Test the edit session shows the doctor recorded on the appointment."""
        appointment = Appointment(
            id=7, doctorId="d1", doctorName="Dr. Old Name", specialization="Cardio",
            disease="flu", date="2024-05-01", time="10:00",
        )

        state = client.session.open_for_appointment(appointment)

        assert state.mode == Edit(appointment)
        assert state.doctor == Doctor(
            id="d1", name="Dr. Old Name", specialty="Cardio", diseases=["flu"]
        )

    def test_snapshot_without_disease(self):
        appointment = Appointment(
            id=3, doctorId="d1", doctorName="Dr. A", specialization="Cardio",
            date="2024-05-01", time="10:00",
        )
        assert appointment.snapshot_doctor().diseases == []

    def test_second_open_replaces_first(self, client):
        """Test only one session exists at a time."""
        client.session.open_for_doctor(dr_a)
        client.session.open_for_doctor(dr_b)

        assert isinstance(client.session.state, Open)
        assert client.session.doctor.id == "d2"

    def test_cancel(self, client):
        client.session.open_for_doctor(dr_a)
        client.session.cancel()
        assert client.session.is_open is False

    async def test_submit_create(self, client, backend):
        """Test submitting a create session books and closes."""
        client.session.open_for_doctor(dr_a)

        assert await client.session.submit("2024-05-01", "10:00") is True
        assert isinstance(client.session.state, Closed)
        assert backend.appointments[-1]["doctorId"] == "d1"

    async def test_submit_edit(self, client, backend):
        """Test submitting an edit session preserves id, doctor id and disease."""
        await client.store.load()
        client.session.open_for_appointment(client.store.get(7))

        assert await client.session.submit("2024-06-01", "10:00") is True
        assert client.session.is_open is False
        record = client.store.get(7)
        assert (record.id, record.doctor_id, record.disease, record.date) == (
            7, "d1", "flu", "2024-06-01"
        )
        assert backend.calls_to("POST") == []

    async def test_submit_failure_stays_open(self, client, backend, notifier):
        """Test a failed submit keeps the session for a retry."""
        client.session.open_for_doctor(dr_a)
        backend.fail("POST", "/appointments")

        assert await client.session.submit("2024-05-01", "10:00") is False
        assert client.session.is_open is True
        assert notifier.errors

        assert await client.session.submit("2024-05-01", "10:00") is True
        assert client.session.is_open is False

    async def test_edit_failure_stays_open(self, client, backend):
        await client.store.load()
        client.session.open_for_appointment(client.store.get(8))
        backend.fail("PUT", "/appointments/8", 502)

        assert await client.session.submit("2024-06-01", "10:00") is False
        assert isinstance(client.session.state.mode, Edit)
        assert client.store.get(8).date == "2024-05-02"

    async def test_submit_when_closed(self, client, backend):
        assert await client.session.submit("2024-05-01", "10:00") is False
        assert backend.calls == []

    async def test_replacement_during_submit_stays_open(self, client, backend):
        """Test a session opened while a submit is in flight survives it."""
        create = client.store.create

        async def create_while_user_picks_another(doctor, date, time):
            client.session.open_for_doctor(dr_b)
            return await create(doctor, date, time)

        client.store.create = create_while_user_picks_another
        client.session.open_for_doctor(dr_a)

        assert await client.session.submit("2024-05-01", "10:00") is True
        assert client.session.is_open is True
        assert client.session.doctor.id == "d2"
        assert backend.appointments[-1]["doctorId"] == "d1"
