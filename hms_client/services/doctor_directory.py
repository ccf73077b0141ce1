from typing import List, Optional
import logging

from ..core.errors import GatewayError
from ..models.doctor import Doctor
from .gateway import RemoteGateway
from .notifications import Notifier

logger = logging.getLogger(__name__)


class DoctorDirectory:
    """The doctor roster plus the results of the last explicit search."""

    def __init__(self, gateway: RemoteGateway, notifier: Notifier):
        self.gateway = gateway
        self.notifier = notifier
        self._doctors: List[Doctor] = []
        self._results: Optional[List[Doctor]] = None

    @property
    def doctors(self) -> List[Doctor]:
        return list(self._doctors)

    @property
    def has_searched(self) -> bool:
        return self._results is not None

    @property
    def results(self) -> List[Doctor]:
        """Doctors shown to the user; empty until the first search."""
        return list(self._results) if self._results is not None else []

    async def load(self) -> bool:
        try:
            doctors = await self.gateway.list_doctors()
        except GatewayError as e:
            logger.error(f"Error fetching doctors: {e.detail}")
            self.notifier.error("Could not load doctors. Please try again.")
            return False

        self._doctors = doctors
        logger.info(f"Loaded {len(doctors)} doctors")
        return True

    def filter(self, search_term: str) -> List[Doctor]:
        return [doctor for doctor in self._doctors if doctor.treats(search_term)]

    def search(self, search_term: str) -> List[Doctor]:
        self._results = self.filter(search_term)
        return self.results

    def clear_search(self) -> None:
        self._results = None
