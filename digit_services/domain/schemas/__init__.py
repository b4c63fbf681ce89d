"""Domain schemas. Request/response envelopes and search criteria."""

from digit_services.domain.schemas.common import (
    ErrorResponse,
    Pagination,
    RequestInfo,
    ResponseInfo,
    UserInfo,
)
from digit_services.domain.schemas.error_retry import (
    ErrorDetailSearchCriteria,
    ErrorDetailSearchRequest,
    ErrorDetailSearchResponse,
    ErrorRetryRequest,
    ErrorRetryResponse,
    IndexSearchResult,
)
from digit_services.domain.schemas.service import (
    ServiceCriteria,
    ServiceRequest,
    ServiceResponse,
    ServiceSearchRequest,
)
from digit_services.domain.schemas.service_definition import (
    ServiceDefinitionCriteria,
    ServiceDefinitionRequest,
    ServiceDefinitionResponse,
    ServiceDefinitionSearchRequest,
)

__all__ = [
    "ErrorDetailSearchCriteria",
    "ErrorDetailSearchRequest",
    "ErrorDetailSearchResponse",
    "ErrorResponse",
    "ErrorRetryRequest",
    "ErrorRetryResponse",
    "IndexSearchResult",
    "Pagination",
    "RequestInfo",
    "ResponseInfo",
    "ServiceCriteria",
    "ServiceDefinitionCriteria",
    "ServiceDefinitionRequest",
    "ServiceDefinitionResponse",
    "ServiceDefinitionSearchRequest",
    "ServiceRequest",
    "ServiceResponse",
    "ServiceSearchRequest",
    "UserInfo",
]
