import httpx
import pytest

from hms_client.core.config import Settings
from hms_client.core.security import InMemoryTokenStore
from hms_client.main import HospitalClient
from hms_client.services.navigation import IntentRecorder
from hms_client.services.notifications import CollectingNotifier
from tests.fake_backend import FakeBackend

# Test data
test_doctors = [
    {"id": "d1", "name": "Dr. A", "specialty": "Cardio", "diseases": ["flu", "cold"]},
    {"id": "d2", "name": "Dr. B", "specialty": "Oncology", "diseases": ["Lung Cancer"]},
    {"id": "d3", "name": "Dr. C", "specialty": "General", "diseases": ["Influenza", "Fever"]},
]

test_appointments = [
    {
        "id": 7,
        "doctorId": "d1",
        "doctorName": "Dr. A",
        "specialization": "Cardio",
        "disease": "flu",
        "date": "2024-05-01",
        "time": "10:00",
    },
    {
        "id": 8,
        "doctorId": "d2",
        "doctorName": "Dr. B",
        "specialization": "Oncology",
        "disease": "Lung Cancer",
        "date": "2024-05-02",
        "time": "11:30",
    },
]


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def backend():
    return FakeBackend(doctors=test_doctors, appointments=test_appointments)


@pytest.fixture
def notifier():
    return CollectingNotifier()


@pytest.fixture
def navigator():
    return IntentRecorder()


@pytest.fixture
def token_store():
    return InMemoryTokenStore("test-token")


@pytest.fixture
def test_settings():
    return Settings(
        API_BASE_URL="http://testserver",
        AUTH_BASE_URL="http://testserver",
        REQUEST_TIMEOUT_SECONDS=5.0,
    )


@pytest.fixture
def client(backend, notifier, navigator, token_store, test_settings):
    transport = httpx.ASGITransport(app=backend.app)
    return HospitalClient(
        settings=test_settings,
        token_store=token_store,
        notifier=notifier,
        navigator=navigator,
        api_transport=transport,
        auth_transport=transport,
    )
