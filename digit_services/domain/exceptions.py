"""Domain exceptions. No infrastructure imports."""

from digit_services.domain import error_codes


class DomainError(Exception):
    """Base for all domain-layer errors. Carries a stable error code for API clients."""

    code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        if code is not None:
            self.code = code
        super().__init__(message)


class DomainValidationError(DomainError):
    """Raised when domain validation rules are violated."""

    code = "VALIDATION_ERROR"


class DuplicateServiceDefinitionError(DomainValidationError):
    """Raised when a service definition with the same tenantId and code already exists."""

    code = error_codes.SERVICE_DEFINITION_ALREADY_EXISTS_ERR_CODE

    def __init__(self, message: str = error_codes.SERVICE_DEFINITION_ALREADY_EXISTS_ERR_MSG) -> None:
        super().__init__(message)


class DuplicateAttributeCodeError(DomainValidationError):
    """Raised when two attribute definitions of one service definition share a code."""

    code = error_codes.ATTRIBUTE_CODE_UNIQUENESS_ERR_CODE

    def __init__(self, message: str = error_codes.ATTRIBUTE_CODE_UNIQUENESS_ERR_MSG) -> None:
        super().__init__(message)


class InvalidServiceDefinitionError(DomainValidationError):
    """Raised when a service references a service definition that does not exist."""

    code = error_codes.SERVICE_REQUEST_INVALID_SERVICE_DEF_ID_CODE

    def __init__(self, message: str = error_codes.SERVICE_REQUEST_INVALID_SERVICE_DEF_ID_MSG) -> None:
        super().__init__(message)


class UnrecognizedAttributeError(DomainValidationError):
    """Raised when an attribute value names a code absent from the service definition."""

    code = error_codes.SERVICE_REQUEST_UNRECOGNIZED_ATTRIBUTE_CODE

    def __init__(self, message: str = error_codes.SERVICE_REQUEST_UNRECOGNIZED_ATTRIBUTE_MSG) -> None:
        super().__init__(message)


class AttributeValueUniquenessError(DomainValidationError):
    """Raised when a service carries more than one value for the same attribute code."""

    code = error_codes.SERVICE_REQUEST_ATTRIBUTE_VALUES_UNIQUENESS_ERR_CODE

    def __init__(
        self, message: str = error_codes.SERVICE_REQUEST_ATTRIBUTE_VALUES_UNIQUENESS_ERR_MSG
    ) -> None:
        super().__init__(message)


class RequiredAttributeMissingError(DomainValidationError):
    """Raised when a required attribute has no value in the service."""

    code = error_codes.SERVICE_REQUEST_REQUIRED_ATTRIBUTE_NOT_PROVIDED_ERR_CODE

    def __init__(
        self, message: str = error_codes.SERVICE_REQUEST_REQUIRED_ATTRIBUTE_NOT_PROVIDED_ERR_MSG
    ) -> None:
        super().__init__(message)


class InvalidAttributeValueError(DomainValidationError):
    """Raised when an attribute value does not match its definition's data type or size."""

    code = error_codes.SERVICE_REQUEST_ATTRIBUTE_INVALID_VALUE_CODE


class InvalidStatusTransitionError(DomainError):
    """Raised when an error record status transition is not allowed."""

    code = "INVALID_STATUS_TRANSITION"
