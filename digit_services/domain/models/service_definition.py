"""Service definitions: the schema of attributes a citizen service request must carry."""

from enum import Enum
from typing import Any, List, Optional

from pydantic import Field

from digit_services.domain.models.base import AuditDetails, CamelModel


class AttributeDataType(str, Enum):
    STRING = "String"
    NUMBER = "Number"
    TEXT = "Text"
    DATETIME = "Datetime"
    SINGLE_VALUE_LIST = "SingleValueList"
    MULTI_VALUE_LIST = "MultiValueList"
    FILE = "File"
    BOOLEAN = "Boolean"


class AttributeDefinition(CamelModel):
    id: Optional[str] = None
    reference_id: Optional[str] = None
    tenant_id: Optional[str] = Field(None, max_length=64)
    code: str = Field(..., min_length=1, max_length=64)
    data_type: AttributeDataType = AttributeDataType.STRING
    values: Optional[List[str]] = None
    is_active: bool = True
    required: bool = False
    regex: Optional[str] = None
    order: Optional[str] = None
    audit_details: Optional[AuditDetails] = None
    additional_details: Optional[Any] = None


class ServiceDefinition(CamelModel):
    """A service definition is unique per (tenant_id, code); attribute codes are unique within it."""

    id: Optional[str] = None
    tenant_id: str = Field(..., min_length=2, max_length=64)
    code: str = Field(..., min_length=1, max_length=64)
    is_active: bool = True
    attributes: List[AttributeDefinition] = Field(default_factory=list)
    audit_details: Optional[AuditDetails] = None
    additional_details: Optional[Any] = None
    client_id: Optional[str] = None
