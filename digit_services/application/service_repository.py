"""Repository protocols for service definitions and services. Infrastructure implements them."""

from typing import List, Protocol

from digit_services.domain.models.service import Service
from digit_services.domain.models.service_definition import ServiceDefinition
from digit_services.domain.schemas.service import ServiceSearchRequest
from digit_services.domain.schemas.service_definition import ServiceDefinitionSearchRequest


class ServiceDefinitionRepository(Protocol):
    """Read side of service definition storage. Writes happen through the persister topic."""

    async def get_service_definitions(
        self, search_request: ServiceDefinitionSearchRequest
    ) -> List[ServiceDefinition]:
        """Return definitions matching the criteria, each with its attribute definitions."""
        ...


class ServiceRepository(Protocol):
    """Read side of service storage."""

    async def get_services(self, search_request: ServiceSearchRequest) -> List[Service]:
        """Return services matching the criteria, each with its attribute values."""
        ...
