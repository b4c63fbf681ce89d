"""Schemas for the service definition API."""

from typing import List, Optional

from pydantic import Field

from digit_services.domain.models.base import CamelModel
from digit_services.domain.models.service_definition import ServiceDefinition
from digit_services.domain.schemas.common import Pagination, RequestInfo, ResponseInfo


class ServiceDefinitionRequest(CamelModel):
    request_info: Optional[RequestInfo] = Field(None, alias="RequestInfo")
    service_definition: ServiceDefinition = Field(..., alias="ServiceDefinition")


class ServiceDefinitionCriteria(CamelModel):
    tenant_id: str = Field(..., min_length=2, max_length=64)
    ids: Optional[List[str]] = None
    code: Optional[List[str]] = None
    client_id: Optional[str] = None


class ServiceDefinitionSearchRequest(CamelModel):
    request_info: Optional[RequestInfo] = Field(None, alias="RequestInfo")
    service_definition_criteria: ServiceDefinitionCriteria = Field(
        ..., alias="ServiceDefinitionCriteria"
    )
    pagination: Optional[Pagination] = Field(None, alias="Pagination")


class ServiceDefinitionResponse(CamelModel):
    response_info: Optional[ResponseInfo] = Field(None, alias="ResponseInfo")
    service_definition: List[ServiceDefinition] = Field(
        default_factory=list, alias="ServiceDefinition"
    )
    pagination: Optional[Pagination] = Field(None, alias="Pagination")
