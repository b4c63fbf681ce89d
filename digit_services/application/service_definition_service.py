"""Service definition application service: validate, enrich, hand off to the persister."""

import logging
from typing import List

from digit_services.application.enrichment import enrich_service_definition_request
from digit_services.application.exceptions import MessagingFailureError
from digit_services.application.gateways import QueuePublisher
from digit_services.application.service_repository import ServiceDefinitionRepository
from digit_services.application.service_validators import ServiceDefinitionRequestValidator
from digit_services.domain.models.service_definition import ServiceDefinition
from digit_services.domain.schemas.service_definition import (
    ServiceDefinitionRequest,
    ServiceDefinitionSearchRequest,
)


class ServiceDefinitionService:
    """
    Validation reads stored definitions; persistence is asynchronous: the enriched request
    is pushed to the save topic and written by the platform persister.
    """

    def __init__(
        self,
        repository: ServiceDefinitionRepository,
        publisher: QueuePublisher,
        save_topic: str,
        logger: logging.Logger,
    ) -> None:
        self._repository = repository
        self._validator = ServiceDefinitionRequestValidator(repository)
        self._publisher = publisher
        self._save_topic = save_topic
        self._logger = logger

    async def create(self, request: ServiceDefinitionRequest) -> ServiceDefinition:
        await self._validator.validate(request)

        enrich_service_definition_request(request)
        definition = request.service_definition

        try:
            await self._publisher.push(self._save_topic, [request.to_wire()])
        except Exception as e:
            self._logger.error(
                "service_definition_publish_failed",
                extra={"service_definition_id": definition.id, "error": str(e)},
            )
            raise MessagingFailureError(f"Publish failed: {e}") from e

        self._logger.info(
            "service_definition_created",
            extra={
                "service_definition_id": definition.id,
                "tenant_id": definition.tenant_id,
                "code": definition.code,
                "attributes": len(definition.attributes),
            },
        )
        return definition

    async def search(self, request: ServiceDefinitionSearchRequest) -> List[ServiceDefinition]:
        return await self._repository.get_service_definitions(request)
