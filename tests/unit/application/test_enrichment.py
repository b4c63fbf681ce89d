"""Tests for service definition and service enrichment."""

from digit_services.application.enrichment import (
    enrich_service_definition_request,
    enrich_service_request,
)
from digit_services.domain.models.service import AttributeValue, Service
from digit_services.domain.models.service_definition import AttributeDefinition, ServiceDefinition
from digit_services.domain.schemas.common import RequestInfo, UserInfo
from digit_services.domain.schemas.service import ServiceRequest
from digit_services.domain.schemas.service_definition import ServiceDefinitionRequest


def _request_info(uuid: str = "user-1") -> RequestInfo:
    return RequestInfo(user_info=UserInfo(uuid=uuid))


def _definition_request() -> ServiceDefinitionRequest:
    return ServiceDefinitionRequest(
        request_info=_request_info(),
        service_definition=ServiceDefinition(
            tenant_id="pb.amritsar",
            code="FEEDBACK",
            attributes=[AttributeDefinition(code="A"), AttributeDefinition(code="B")],
        ),
    )


def test_definition_and_attributes_receive_ids():
    request = _definition_request()

    enrich_service_definition_request(request)

    definition = request.service_definition
    assert definition.id
    attribute_ids = [a.id for a in definition.attributes]
    assert all(attribute_ids)
    assert len(set(attribute_ids + [definition.id])) == 3


def test_attributes_reference_parent_definition():
    request = _definition_request()

    enrich_service_definition_request(request)

    definition = request.service_definition
    assert all(a.reference_id == definition.id for a in definition.attributes)
    assert all(a.tenant_id == "pb.amritsar" for a in definition.attributes)


def test_one_audit_snapshot_shared_by_definition_and_attributes():
    request = _definition_request()

    enrich_service_definition_request(request)

    audit = request.service_definition.audit_details
    assert audit.created_by == "user-1"
    assert audit.last_modified_by == "user-1"
    assert audit.created_time == audit.last_modified_time
    for attribute in request.service_definition.attributes:
        assert attribute.audit_details == audit


def test_enrichment_without_user_info_leaves_actor_empty():
    request = ServiceDefinitionRequest(
        service_definition=ServiceDefinition(tenant_id="pb", code="X")
    )

    enrich_service_definition_request(request)

    assert request.service_definition.id
    assert request.service_definition.audit_details.created_by is None
    assert request.service_definition.audit_details.created_time is not None


def test_service_enrichment_links_values_to_service():
    request = ServiceRequest(
        request_info=_request_info("citizen-9"),
        service=Service(
            tenant_id="pb",
            service_def_id="SD1",
            attributes=[
                AttributeValue(attribute_code="A", value="x"),
                AttributeValue(attribute_code="B", value=2),
            ],
        ),
    )

    enrich_service_request(request)

    service = request.service
    assert service.id
    assert service.audit_details.created_by == "citizen-9"
    for value in service.attributes:
        assert value.id
        assert value.reference_id == service.id
        assert value.audit_details.created_time == service.audit_details.created_time
