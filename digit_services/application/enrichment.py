"""Enrichment of service definitions and services before they are handed to the persister."""

import uuid
from typing import Optional

from digit_services.domain.models.base import AuditDetails
from digit_services.domain.schemas.common import RequestInfo
from digit_services.domain.schemas.service import ServiceRequest
from digit_services.domain.schemas.service_definition import ServiceDefinitionRequest


def _actor(request_info: Optional[RequestInfo]) -> Optional[str]:
    return request_info.actor_uuid if request_info else None


def enrich_service_definition_request(request: ServiceDefinitionRequest) -> None:
    """
    Assign ids and audit details in place. One audit snapshot is shared by the definition
    and every attribute, so all carry the same actor and the same timestamps.
    """
    definition = request.service_definition
    definition.id = str(uuid.uuid4())

    audit_details = AuditDetails.snapshot(_actor(request.request_info))

    for attribute in definition.attributes:
        attribute.id = str(uuid.uuid4())
        attribute.audit_details = audit_details.model_copy()
        attribute.reference_id = definition.id
        if attribute.tenant_id is None:
            attribute.tenant_id = definition.tenant_id

    definition.audit_details = audit_details


def enrich_service_request(request: ServiceRequest) -> None:
    """Assign ids and a shared audit snapshot to a service and its attribute values, in place."""
    service = request.service
    service.id = str(uuid.uuid4())

    audit_details = AuditDetails.snapshot(_actor(request.request_info))

    for value in service.attributes:
        value.id = str(uuid.uuid4())
        value.audit_details = audit_details.model_copy()
        value.reference_id = service.id

    service.audit_details = audit_details
