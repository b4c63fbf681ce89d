"""Services: filled-in requests carrying values for a service definition's attributes."""

from typing import Any, List, Optional

from pydantic import Field

from digit_services.domain.models.base import AuditDetails, CamelModel


class AttributeValue(CamelModel):
    id: Optional[str] = None
    reference_id: Optional[str] = None
    attribute_code: str = Field(..., min_length=1, max_length=64)
    value: Any = None
    audit_details: Optional[AuditDetails] = None
    additional_details: Optional[Any] = None


class Service(CamelModel):
    id: Optional[str] = None
    tenant_id: str = Field(..., min_length=2, max_length=64)
    service_def_id: str = Field(..., min_length=1)
    reference_id: Optional[str] = None
    attributes: List[AttributeValue] = Field(default_factory=list)
    audit_details: Optional[AuditDetails] = None
    additional_details: Optional[Any] = None
    account_id: Optional[str] = None
    client_id: Optional[str] = None
