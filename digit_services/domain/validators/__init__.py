"""Domain validators. Pure validation functions."""

from digit_services.domain.validators.retry_validator import (
    status_after_failed_replay,
    validate_retry_attempt,
)
from digit_services.domain.validators.service_validator import (
    validate_attribute_definition_uniqueness,
    validate_attribute_value_type,
    validate_service_against_definition,
    validate_service_definition_absent,
    validate_service_definition_exists,
)

__all__ = [
    "status_after_failed_replay",
    "validate_attribute_definition_uniqueness",
    "validate_attribute_value_type",
    "validate_retry_attempt",
    "validate_service_against_definition",
    "validate_service_definition_absent",
    "validate_service_definition_exists",
]
