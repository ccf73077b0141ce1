import asyncio

import httpx
import pytest

from hms_client.core.errors import NetworkFailure, NotFoundFailure
from hms_client.core.http import create_http_client
from hms_client.core.security import InMemoryTokenStore, SessionContext
from hms_client.models.appointment import AppointmentCreate
from hms_client.models.doctor import Doctor
from hms_client.services.gateway import RemoteGateway

pytestmark = pytest.mark.anyio


def gateway_for(handler, token=None):
    context = SessionContext(InMemoryTokenStore(token))
    client = create_http_client(
        "http://testserver", context, httpx.MockTransport(handler), timeout=1.0
    )
    return RemoteGateway(client)


class TestRemoteGateway:

    async def test_list_doctors(self, client):
        doctors = await client.gateway.list_doctors()
        assert doctors[0] == Doctor(id="d1", name="Dr. A", specialty="Cardio", diseases=["flu", "cold"])

    async def test_sends_bearer_token(self, client, backend):
        await client.gateway.list_appointments()
        assert backend.headers[-1]["authorization"] == "Bearer test-token"

    async def test_no_token_no_header(self):
        seen = {}

        def handler(request):
            seen.update(request.headers)
            return httpx.Response(200, json=[])

        await gateway_for(handler).list_doctors()
        assert "authorization" not in seen

    async def test_create_posts_wire_payload(self, client, backend):
        payload = AppointmentCreate(
            doctor_id="d1", doctor_name="Dr. A", specialization="Cardio",
            date="2024-05-01", time="10:00",
        )

        created = await client.gateway.create_appointment(payload)

        assert created.id == 9
        assert created.doctor_id == "d1"
        assert created.disease is None

    async def test_not_found(self, client):
        with pytest.raises(NotFoundFailure):
            await client.gateway.delete_appointment(404)

    async def test_server_error(self, client, backend):
        backend.fail("GET", "/doctors", 500)

        with pytest.raises(NetworkFailure) as exc_info:
            await client.gateway.list_doctors()
        assert exc_info.value.status_code == 500

    async def test_unreachable(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(NetworkFailure):
            await gateway_for(handler).list_doctors()

    async def test_timeout(self):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(NetworkFailure) as exc_info:
            await gateway_for(handler).list_appointments(timeout=0.5)
        assert "timed out" in exc_info.value.detail

    async def test_malformed_payload(self):
        def handler(request):
            return httpx.Response(200, json=[{"id": "d1"}])

        with pytest.raises(NetworkFailure):
            await gateway_for(handler).list_doctors()

    async def test_cancellation_propagates(self):
        """Test cancelling the caller abandons the request untouched."""
        started = asyncio.Event()

        async def handler(request):
            started.set()
            await asyncio.sleep(10)
            return httpx.Response(200, json=[])

        task = asyncio.ensure_future(gateway_for(handler).list_doctors())
        await started.wait()
        task.cancel()

        with pytest.raises(asyncio.CancelledError):
            await task
