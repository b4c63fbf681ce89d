"""Error codes and messages returned to API clients. Codes are part of the public contract."""

# --- Service definitions ---
SERVICE_DEFINITION_ALREADY_EXISTS_ERR_CODE = "SERVICE_DEFINITION_ALREADY_EXISTS_ERR_CODE"
SERVICE_DEFINITION_ALREADY_EXISTS_ERR_MSG = (
    "Service definition with the given tenantId and code combination already exists"
)

ATTRIBUTE_CODE_UNIQUENESS_ERR_CODE = "ATTRIBUTE_CODE_UNIQUENESS_ERR_CODE"
ATTRIBUTE_CODE_UNIQUENESS_ERR_MSG = (
    "Attribute definitions provided as part of service definition must have unique codes"
)

# --- Services ---
SERVICE_REQUEST_INVALID_SERVICE_DEF_ID_CODE = "SERVICE_REQUEST_INVALID_SERVICE_DEF_ID"
SERVICE_REQUEST_INVALID_SERVICE_DEF_ID_MSG = "Invalid service definition id"

SERVICE_REQUEST_UNRECOGNIZED_ATTRIBUTE_CODE = "SERVICE_REQUEST_UNRECOGNIZED_ATTRIBUTE_CODE"
SERVICE_REQUEST_UNRECOGNIZED_ATTRIBUTE_MSG = (
    "Provided attribute code is not a part of the concerned service definition"
)

SERVICE_REQUEST_ATTRIBUTE_INVALID_VALUE_CODE = "SERVICE_REQUEST_ATTRIBUTE_INVALID_VALUE_CODE"
SERVICE_REQUEST_ATTRIBUTE_INVALID_NUMBER_VALUE_MSG = (
    "Attribute Value provided against the attribute definition of type Number must be a number"
)
SERVICE_REQUEST_ATTRIBUTE_INVALID_STRING_VALUE_MSG = (
    "Attribute Value provided against the attribute definition of type String must be a string"
)
SERVICE_REQUEST_ATTRIBUTE_INVALID_TEXT_VALUE_MSG = (
    "Attribute Value provided against the attribute definition of type Text must be a string"
)
SERVICE_REQUEST_ATTRIBUTE_INVALID_SINGLE_VALUE_LIST_VALUE_MSG = (
    "Attribute Value provided against the attribute definition of type single value list "
    "must be an instance of String"
)
SERVICE_REQUEST_ATTRIBUTE_INVALID_MULTI_VALUE_LIST_VALUE_MSG = (
    "Attribute Value provided against the attribute definition of type multi value list "
    "must be an instance of list"
)

INVALID_SIZE_OF_STRING_CODE = "INVALID_SIZE_OF_STRING_CODE"
INVALID_SIZE_OF_STRING_MSG = "String value cannot be of length greater than 64"

INVALID_SIZE_OF_TEXT_CODE = "INVALID_SIZE_OF_TEXT_CODE"
INVALID_SIZE_OF_TEXT_MSG = "Text value cannot be of length greater than 1024"

SERVICE_REQUEST_ATTRIBUTE_VALUES_UNIQUENESS_ERR_CODE = (
    "SERVICE_REQUEST_ATTRIBUTE_VALUES_UNIQUENESS_ERR_CODE"
)
SERVICE_REQUEST_ATTRIBUTE_VALUES_UNIQUENESS_ERR_MSG = (
    "Attribute values being passed against a particular service definition must be unique"
)

SERVICE_REQUEST_REQUIRED_ATTRIBUTE_NOT_PROVIDED_ERR_CODE = (
    "SERVICE_REQUEST_REQUIRED_ATTRIBUTE_NOT_PROVIDED_ERR_CODE"
)
SERVICE_REQUEST_REQUIRED_ATTRIBUTE_NOT_PROVIDED_ERR_MSG = (
    "Mandatory attribute value not provided as part of service request"
)

# --- Error retry ---
ERROR_ALREADY_RESOLVED_CODE = "ERROR_ALREADY_RESOLVED"
ERROR_ALREADY_RESOLVED_MSG = "The concerned error has already been retried successfully"

ERROR_RETRIES_EXHAUSTED_CODE = "ERROR_RETRIES_EXHAUSTED"
ERROR_RETRIES_EXHAUSTED_MSG = "The concerned error has been marked as failed and cannot be retried"

MAX_RETRY_COUNT_REACHED_CODE = "MAX_RETRY_COUNT_REACHED"
MAX_RETRY_COUNT_REACHED_MSG = "The concerned error has reached the maximum number of retries allowed"

ERROR_RETRY_ATTEMPT_SUCCESSFUL_CODE = "ERROR_RETRY_ATTEMPT_SUCCESSFUL"
ERROR_RETRY_ATTEMPT_SUCCESSFUL_MSG = "Retry attempt for the concerned error has been processed"
ERROR_RETRY_ATTEMPT_FAILURE_MSG = "The concerned error cannot be retried"
