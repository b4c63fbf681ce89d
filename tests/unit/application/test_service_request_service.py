"""Unit tests for ServiceRequestService."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from digit_services.application.service_request_service import ServiceRequestService
from digit_services.domain.exceptions import (
    InvalidAttributeValueError,
    InvalidServiceDefinitionError,
)
from digit_services.domain.models.service import AttributeValue, Service
from digit_services.domain.models.service_definition import (
    AttributeDataType,
    AttributeDefinition,
    ServiceDefinition,
)
from digit_services.domain.schemas.service import (
    ServiceCriteria,
    ServiceRequest,
    ServiceSearchRequest,
)

SAVE_TOPIC = "save-service"

DEFINITION = ServiceDefinition(
    id="SD1",
    tenant_id="pb",
    code="FEEDBACK",
    attributes=[
        AttributeDefinition(code="rating", data_type=AttributeDataType.NUMBER, required=True),
        AttributeDefinition(code="comment", data_type=AttributeDataType.TEXT),
    ],
)


def _request(*values: AttributeValue) -> ServiceRequest:
    return ServiceRequest(
        service=Service(tenant_id="pb", service_def_id="SD1", attributes=list(values))
    )


@pytest.fixture
def repository():
    r = AsyncMock()
    r.get_services = AsyncMock(return_value=[])
    return r


@pytest.fixture
def definition_repository():
    r = AsyncMock()
    r.get_service_definitions = AsyncMock(return_value=[DEFINITION])
    return r


@pytest.fixture
def publisher():
    p = AsyncMock()
    p.push = AsyncMock(return_value=None)
    return p


@pytest.fixture
def service(repository, definition_repository, publisher):
    return ServiceRequestService(
        repository=repository,
        definition_repository=definition_repository,
        publisher=publisher,
        save_topic=SAVE_TOPIC,
        logger=MagicMock(),
    )


async def test_create_valid_service(service, definition_repository, publisher):
    created = await service.create(
        _request(
            AttributeValue(attribute_code="rating", value=5),
            AttributeValue(attribute_code="comment", value="quick response"),
        )
    )

    assert created.id
    assert all(v.reference_id == created.id for v in created.attributes)
    criteria = definition_repository.get_service_definitions.await_args.args[0].service_definition_criteria
    assert criteria.ids == ["SD1"]
    assert criteria.tenant_id == "pb"
    topic, payload = publisher.push.await_args.args
    assert topic == SAVE_TOPIC
    assert payload[0]["Service"]["id"] == created.id


async def test_unknown_service_definition_rejected(service, definition_repository, publisher):
    definition_repository.get_service_definitions.return_value = []

    with pytest.raises(InvalidServiceDefinitionError):
        await service.create(_request(AttributeValue(attribute_code="rating", value=5)))

    publisher.push.assert_not_awaited()


async def test_wrong_value_type_rejected(service, publisher):
    with pytest.raises(InvalidAttributeValueError):
        await service.create(_request(AttributeValue(attribute_code="rating", value="five")))

    publisher.push.assert_not_awaited()


async def test_search_delegates_to_repository(service, repository):
    request = ServiceSearchRequest(service_criteria=ServiceCriteria(tenant_id="pb"))

    assert await service.search(request) == []
    repository.get_services.assert_awaited_once_with(request)
