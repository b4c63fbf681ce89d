"""Schemas for the service (filled-in request) API."""

from typing import List, Optional

from pydantic import Field

from digit_services.domain.models.base import CamelModel
from digit_services.domain.models.service import Service
from digit_services.domain.schemas.common import Pagination, RequestInfo, ResponseInfo


class ServiceRequest(CamelModel):
    request_info: Optional[RequestInfo] = Field(None, alias="RequestInfo")
    service: Service = Field(..., alias="Service")


class ServiceCriteria(CamelModel):
    """Search parameters for services."""

    tenant_id: str = Field(..., min_length=2, max_length=64)
    ids: Optional[List[str]] = None
    service_def_ids: Optional[List[str]] = None
    reference_ids: Optional[List[str]] = None


class ServiceSearchRequest(CamelModel):
    request_info: Optional[RequestInfo] = Field(None, alias="RequestInfo")
    service_criteria: ServiceCriteria = Field(..., alias="ServiceCriteria")
    pagination: Optional[Pagination] = Field(None, alias="Pagination")


class ServiceResponse(CamelModel):
    response_info: Optional[ResponseInfo] = Field(None, alias="ResponseInfo")
    service: List[Service] = Field(default_factory=list, alias="Service")
    pagination: Optional[Pagination] = Field(None, alias="Pagination")
