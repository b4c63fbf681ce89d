"""Service application service: validate against the definition, enrich, hand off to the persister."""

import logging
from typing import List

from digit_services.application.enrichment import enrich_service_request
from digit_services.application.exceptions import MessagingFailureError
from digit_services.application.gateways import QueuePublisher
from digit_services.application.service_repository import (
    ServiceDefinitionRepository,
    ServiceRepository,
)
from digit_services.application.service_validators import ServiceRequestValidator
from digit_services.domain.models.service import Service
from digit_services.domain.schemas.service import ServiceRequest, ServiceSearchRequest


class ServiceRequestService:
    def __init__(
        self,
        repository: ServiceRepository,
        definition_repository: ServiceDefinitionRepository,
        publisher: QueuePublisher,
        save_topic: str,
        logger: logging.Logger,
    ) -> None:
        self._repository = repository
        self._validator = ServiceRequestValidator(definition_repository)
        self._publisher = publisher
        self._save_topic = save_topic
        self._logger = logger

    async def create(self, request: ServiceRequest) -> Service:
        await self._validator.validate(request)

        enrich_service_request(request)
        service = request.service

        try:
            await self._publisher.push(self._save_topic, [request.to_wire()])
        except Exception as e:
            self._logger.error(
                "service_publish_failed",
                extra={"service_id": service.id, "error": str(e)},
            )
            raise MessagingFailureError(f"Publish failed: {e}") from e

        self._logger.info(
            "service_created",
            extra={
                "service_id": service.id,
                "service_def_id": service.service_def_id,
                "tenant_id": service.tenant_id,
            },
        )
        return service

    async def search(self, request: ServiceSearchRequest) -> List[Service]:
        return await self._repository.get_services(request)
