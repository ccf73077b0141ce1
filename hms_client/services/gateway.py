from typing import Any, Dict, List, Optional, Type, TypeVar
from pydantic import BaseModel, ValidationError
import httpx
import logging
import time

from ..core.errors import NetworkFailure, NotFoundFailure
from ..models.appointment import Appointment, AppointmentCreate, AppointmentId, AppointmentUpdate
from ..models.doctor import Doctor

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class RemoteGateway:
    """CRUD calls for doctors and appointments against the booking service.

    Every method either returns the decoded payload or raises a GatewayError
    subclass. ``timeout`` overrides the client default for a single call, and
    cancelling the awaiting task abandons the request.
    """

    def __init__(self, client: httpx.AsyncClient):
        self.client = client

    async def list_doctors(self, timeout: Optional[float] = None) -> List[Doctor]:
        response = await self._request("GET", "/doctors", timeout=timeout)
        return [self._parse(Doctor, item) for item in self._json(response)]

    async def list_appointments(self, timeout: Optional[float] = None) -> List[Appointment]:
        response = await self._request("GET", "/appointments", timeout=timeout)
        return [self._parse(Appointment, item) for item in self._json(response)]

    async def create_appointment(
        self, payload: AppointmentCreate, timeout: Optional[float] = None
    ) -> Appointment:
        response = await self._request(
            "POST", "/appointments", json=payload.to_wire(), timeout=timeout
        )
        return self._parse(Appointment, self._json(response))

    async def update_appointment(
        self,
        appointment_id: AppointmentId,
        payload: AppointmentUpdate,
        timeout: Optional[float] = None,
    ) -> Dict[str, Any]:
        response = await self._request(
            "PUT", f"/appointments/{appointment_id}", json=payload.to_wire(), timeout=timeout
        )
        return self._json(response) if response.content else {}

    async def delete_appointment(
        self, appointment_id: AppointmentId, timeout: Optional[float] = None
    ) -> None:
        await self._request("DELETE", f"/appointments/{appointment_id}", timeout=timeout)

    async def _request(
        self,
        method: str,
        path: str,
        json: Optional[Dict[str, Any]] = None,
        timeout: Optional[float] = None,
    ) -> httpx.Response:
        kwargs: Dict[str, Any] = {}
        if json is not None:
            kwargs["json"] = json
        if timeout is not None:
            kwargs["timeout"] = timeout

        start_time = time.time()
        try:
            response = await self.client.request(method, path, **kwargs)
        except httpx.TimeoutException as e:
            raise NetworkFailure(f"{method} {path} timed out") from e
        except httpx.HTTPError as e:
            raise NetworkFailure(f"{method} {path} failed: {str(e)}") from e
        process_time = time.time() - start_time

        logger.info(
            f"{method} {path} - "
            f"Status: {response.status_code} - "
            f"Time: {process_time:.4f}s"
        )

        if response.status_code == 404:
            raise NotFoundFailure(f"{path} was not found")
        if response.is_error:
            raise NetworkFailure(
                f"{method} {path} returned {response.status_code}",
                status_code=response.status_code,
            )
        return response

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise NetworkFailure(f"Malformed response body: {str(e)}") from e

    @staticmethod
    def _parse(model: Type[ModelT], data: Any) -> ModelT:
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise NetworkFailure(f"Unexpected {model.__name__} payload: {str(e)}") from e
