"""Validators for service definitions and services. Pure functions over already-fetched data."""

from numbers import Number
from typing import Any, Dict, Iterable, List, Set

from digit_services.domain import error_codes
from digit_services.domain.exceptions import (
    AttributeValueUniquenessError,
    DuplicateAttributeCodeError,
    DuplicateServiceDefinitionError,
    InvalidAttributeValueError,
    InvalidServiceDefinitionError,
    RequiredAttributeMissingError,
    UnrecognizedAttributeError,
)
from digit_services.domain.models.service import AttributeValue, Service
from digit_services.domain.models.service_definition import (
    AttributeDataType,
    AttributeDefinition,
    ServiceDefinition,
)

STRING_MAX_LENGTH = 64
TEXT_MAX_LENGTH = 1024


def validate_service_definition_absent(existing: List[ServiceDefinition]) -> None:
    """Raise DuplicateServiceDefinitionError if the (tenant_id, code) lookup found anything."""
    if existing:
        raise DuplicateServiceDefinitionError()


def validate_attribute_definition_uniqueness(definition: ServiceDefinition) -> None:
    """Walk attributes in order; the first repeated code raises. Later attributes are not inspected."""
    seen: Set[str] = set()
    for attribute in definition.attributes:
        if attribute.code in seen:
            raise DuplicateAttributeCodeError()
        seen.add(attribute.code)


def validate_service_definition_exists(definitions: List[ServiceDefinition]) -> ServiceDefinition:
    """Return the definition a service points at, or raise InvalidServiceDefinitionError."""
    if not definitions:
        raise InvalidServiceDefinitionError()
    return definitions[0]


def validate_attribute_value_uniqueness(values: Iterable[AttributeValue]) -> None:
    seen: Set[str] = set()
    for value in values:
        if value.attribute_code in seen:
            raise AttributeValueUniquenessError()
        seen.add(value.attribute_code)


def validate_attribute_codes_recognized(
    values: Iterable[AttributeValue], definitions_by_code: Dict[str, AttributeDefinition]
) -> None:
    for value in values:
        if value.attribute_code not in definitions_by_code:
            raise UnrecognizedAttributeError()


def validate_required_attributes_present(
    values: Iterable[AttributeValue], definitions: Iterable[AttributeDefinition]
) -> None:
    provided = {value.attribute_code for value in values}
    for definition in definitions:
        if definition.required and definition.code not in provided:
            raise RequiredAttributeMissingError()


def validate_attribute_value_type(value: Any, definition: AttributeDefinition) -> None:
    """Check value against the definition's data type and size limits. Untyped kinds pass."""
    data_type = definition.data_type
    if data_type == AttributeDataType.NUMBER:
        # bool is a Number subclass in Python but never a valid numeric answer
        if isinstance(value, bool) or not isinstance(value, Number):
            raise InvalidAttributeValueError(
                error_codes.SERVICE_REQUEST_ATTRIBUTE_INVALID_NUMBER_VALUE_MSG
            )
    elif data_type == AttributeDataType.STRING:
        if not isinstance(value, str):
            raise InvalidAttributeValueError(
                error_codes.SERVICE_REQUEST_ATTRIBUTE_INVALID_STRING_VALUE_MSG
            )
        if len(value) > STRING_MAX_LENGTH:
            raise InvalidAttributeValueError(
                error_codes.INVALID_SIZE_OF_STRING_MSG,
                code=error_codes.INVALID_SIZE_OF_STRING_CODE,
            )
    elif data_type == AttributeDataType.TEXT:
        if not isinstance(value, str):
            raise InvalidAttributeValueError(
                error_codes.SERVICE_REQUEST_ATTRIBUTE_INVALID_TEXT_VALUE_MSG
            )
        if len(value) > TEXT_MAX_LENGTH:
            raise InvalidAttributeValueError(
                error_codes.INVALID_SIZE_OF_TEXT_MSG,
                code=error_codes.INVALID_SIZE_OF_TEXT_CODE,
            )
    elif data_type == AttributeDataType.SINGLE_VALUE_LIST:
        if not isinstance(value, str):
            raise InvalidAttributeValueError(
                error_codes.SERVICE_REQUEST_ATTRIBUTE_INVALID_SINGLE_VALUE_LIST_VALUE_MSG
            )
    elif data_type == AttributeDataType.MULTI_VALUE_LIST:
        if not isinstance(value, list):
            raise InvalidAttributeValueError(
                error_codes.SERVICE_REQUEST_ATTRIBUTE_INVALID_MULTI_VALUE_LIST_VALUE_MSG
            )


def validate_service_against_definition(service: Service, definition: ServiceDefinition) -> None:
    """
    Validate a service's attribute values against its definition: codes recognized, no code
    repeated, required attributes present, each value matching its declared type.
    Raises the first violation found.
    """
    definitions_by_code = {attribute.code: attribute for attribute in definition.attributes}
    validate_attribute_codes_recognized(service.attributes, definitions_by_code)
    validate_attribute_value_uniqueness(service.attributes)
    validate_required_attributes_present(service.attributes, definition.attributes)
    for value in service.attributes:
        validate_attribute_value_type(value.value, definitions_by_code[value.attribute_code])
