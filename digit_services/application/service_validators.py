"""Request validators that need stored state. Each fails fast and never mutates the request."""

from digit_services.application.service_repository import ServiceDefinitionRepository
from digit_services.domain.schemas.common import Pagination
from digit_services.domain.schemas.service import ServiceRequest
from digit_services.domain.schemas.service_definition import (
    ServiceDefinitionCriteria,
    ServiceDefinitionRequest,
    ServiceDefinitionSearchRequest,
)
from digit_services.domain.validators.service_validator import (
    validate_attribute_definition_uniqueness,
    validate_service_against_definition,
    validate_service_definition_absent,
    validate_service_definition_exists,
)

EXISTENCE_CHECK_LIMIT = 10


class ServiceDefinitionRequestValidator:
    def __init__(self, repository: ServiceDefinitionRepository) -> None:
        self._repository = repository

    async def validate(self, request: ServiceDefinitionRequest) -> None:
        """
        Reject a definition whose (tenant_id, code) already exists, then one whose attribute
        codes repeat. Raises DuplicateServiceDefinitionError or DuplicateAttributeCodeError.
        """
        definition = request.service_definition

        existing = await self._repository.get_service_definitions(
            ServiceDefinitionSearchRequest(
                request_info=request.request_info,
                service_definition_criteria=ServiceDefinitionCriteria(
                    tenant_id=definition.tenant_id,
                    code=[definition.code],
                ),
                pagination=Pagination(offset=0, limit=EXISTENCE_CHECK_LIMIT),
            )
        )
        validate_service_definition_absent(existing)

        validate_attribute_definition_uniqueness(definition)


class ServiceRequestValidator:
    def __init__(self, repository: ServiceDefinitionRepository) -> None:
        self._repository = repository

    async def validate(self, request: ServiceRequest) -> None:
        """Resolve the referenced service definition and check every attribute value against it."""
        service = request.service

        definitions = await self._repository.get_service_definitions(
            ServiceDefinitionSearchRequest(
                request_info=request.request_info,
                service_definition_criteria=ServiceDefinitionCriteria(
                    tenant_id=service.tenant_id,
                    ids=[service.service_def_id],
                ),
                pagination=Pagination(offset=0, limit=1),
            )
        )
        definition = validate_service_definition_exists(definitions)

        validate_service_against_definition(service, definition)
