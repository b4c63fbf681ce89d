"""Domain models. Pure business entities."""

from digit_services.domain.models.base import AuditDetails, CamelModel
from digit_services.domain.models.error_record import (
    ApiDetails,
    ErrorEntity,
    ErrorRecord,
    ErrorStatus,
)
from digit_services.domain.models.service import AttributeValue, Service
from digit_services.domain.models.service_definition import (
    AttributeDataType,
    AttributeDefinition,
    ServiceDefinition,
)

__all__ = [
    "ApiDetails",
    "AttributeDataType",
    "AttributeDefinition",
    "AttributeValue",
    "AuditDetails",
    "CamelModel",
    "ErrorEntity",
    "ErrorRecord",
    "ErrorStatus",
    "Service",
    "ServiceDefinition",
]
