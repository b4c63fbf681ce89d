"""Domain layer: models, schemas, validators, exceptions. Pure business logic only."""

from digit_services.domain.exceptions import (
    AttributeValueUniquenessError,
    DomainError,
    DomainValidationError,
    DuplicateAttributeCodeError,
    DuplicateServiceDefinitionError,
    InvalidAttributeValueError,
    InvalidServiceDefinitionError,
    InvalidStatusTransitionError,
    RequiredAttributeMissingError,
    UnrecognizedAttributeError,
)
from digit_services.domain.models import (
    AttributeDefinition,
    AttributeValue,
    AuditDetails,
    ErrorRecord,
    ErrorStatus,
    Service,
    ServiceDefinition,
)

__all__ = [
    "AttributeDefinition",
    "AttributeValue",
    "AttributeValueUniquenessError",
    "AuditDetails",
    "DomainError",
    "DomainValidationError",
    "DuplicateAttributeCodeError",
    "DuplicateServiceDefinitionError",
    "ErrorRecord",
    "ErrorStatus",
    "InvalidAttributeValueError",
    "InvalidServiceDefinitionError",
    "InvalidStatusTransitionError",
    "RequiredAttributeMissingError",
    "Service",
    "ServiceDefinition",
    "UnrecognizedAttributeError",
]
